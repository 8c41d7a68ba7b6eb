""" Tree walking interpreter for pascal programs. """

import logging
import operator
from ..common import ExecutionError
from ..lang.pascal.nodes import NodeKind
from .console import StreamInput, StreamOutput
from .values import Value, ValueKind, format_value, promote_pair


class Executor:
    """ Executes a program tree by visiting its nodes.

    Statements are executed for their effect on the symbol table and the
    console, expressions evaluate to Value objects. Runtime errors abort
    the execution with an ExecutionError.
    """

    logger = logging.getLogger("pascal.executor")

    arithmetic_ops = {
        NodeKind.ADD: operator.add,
        NodeKind.SUBTRACT: operator.sub,
        NodeKind.MULTIPLY: operator.mul,
    }

    comparison_ops = {
        NodeKind.EQ: operator.eq,
        NodeKind.NE: operator.ne,
        NodeKind.LT: operator.lt,
        NodeKind.LE: operator.le,
        NodeKind.GT: operator.gt,
        NodeKind.GE: operator.ge,
    }

    def __init__(self, symbol_table, output=None, reader=None):
        self.symbol_table = symbol_table
        self.output = StreamOutput() if output is None else output
        self.reader = StreamInput() if reader is None else reader

    def error(self, msg, node):
        """ Abort execution with an error at the given node """
        raise ExecutionError(msg, node.location)

    # Statements
    def execute(self, node):
        """ Execute a statement """
        kind = node.kind
        if kind is NodeKind.PROGRAM:
            self.execute_program(node)
        elif kind is NodeKind.COMPOUND:
            for statement in node:
                self.execute(statement)
        elif kind is NodeKind.ASSIGN:
            self.execute_assign(node)
        elif kind is NodeKind.LOOP:
            self.execute_loop(node)
        elif kind is NodeKind.IF:
            self.execute_if(node)
        elif kind is NodeKind.CASE:
            self.execute_case(node)
        elif kind in (NodeKind.WRITE, NodeKind.WRITELN):
            self.execute_write(node)
        elif kind in (NodeKind.READ, NodeKind.READLN):
            self.execute_read(node)
        else:  # pragma: no cover
            raise NotImplementedError(str(node))

    def execute_program(self, node):
        self.logger.debug("Executing program %s", node.text)
        for statement in node:
            self.execute(statement)
        self.logger.debug("Program %s finished", node.text)

    def execute_assign(self, node):
        target, expression = node.children
        self.store(target, self.evaluate(expression))

    def store(self, variable, value):
        """ Store a value in the entry of a variable """
        entry = variable.symbol
        if entry is None:
            entry = self.symbol_table.lookup(variable.text)
            if entry is None:
                entry = self.symbol_table.enter(variable.text)
        entry.value = value

    def execute_loop(self, node):
        """ Execute the children in turn, until a test is true """
        while True:
            for child in node:
                if child.kind is NodeKind.TEST:
                    if self.evaluate_boolean(child.children[0]):
                        return
                else:
                    self.execute(child)

    def execute_if(self, node):
        if self.evaluate_boolean(node.children[0]):
            self.execute(node.children[1])
        elif len(node.children) > 2:
            self.execute(node.children[2])

    def execute_case(self, node):
        """ Execute the first branch with a constant equal to the selector.

        A branch without constants matches any selector.
        """
        selector = self.evaluate(node.children[0])
        if selector.kind is not ValueKind.INTEGER:
            self.error("Expected integer case selector", node.children[0])

        for branch in node.children[1:]:
            constants = branch.children[:-1]
            if not constants or any(
                constant.value.data == selector.data for constant in constants
            ):
                self.execute(branch.children[-1])
                break

    def execute_write(self, node):
        texts = [self.format_argument(argument) for argument in node.children]
        if node.kind is NodeKind.WRITELN:
            texts.append("\n")
        self.output.emit("".join(texts))

    def format_argument(self, argument):
        """ Evaluate and format a single write argument """
        if argument.kind is NodeKind.FORMAT:
            value = self.evaluate(argument.children[0])
            width = self.evaluate_integer(argument.children[1])
            if len(argument.children) > 2:
                decimals = self.evaluate_integer(argument.children[2])
            else:
                decimals = None
            return format_value(value, width, decimals)
        return format_value(self.evaluate(argument))

    def execute_read(self, node):
        for variable in node.children:
            value = self.reader.read_value()
            if value is None:
                self.error("Read past end of input", variable)
            self.store(variable, value)

        if node.kind is NodeKind.READLN:
            self.reader.skip_line()

    # Expressions
    def evaluate(self, node):
        """ Evaluate an expression to a value """
        kind = node.kind
        if kind in (
            NodeKind.INTEGER_CONSTANT,
            NodeKind.REAL_CONSTANT,
            NodeKind.STRING_CONSTANT,
        ):
            value = node.value
        elif kind is NodeKind.VARIABLE:
            value = self.evaluate_variable(node)
        elif kind is NodeKind.NOT:
            value = Value.boolean(not self.evaluate_boolean(node.children[0]))
        elif kind is NodeKind.NEGATE:
            value = self.evaluate_negate(node)
        elif kind in (NodeKind.AND, NodeKind.OR):
            value = self.evaluate_logical(node)
        elif kind in self.arithmetic_ops:
            value = self.evaluate_arithmetic(node)
        elif kind is NodeKind.DIVIDE:
            value = self.evaluate_divide(node)
        elif kind in (NodeKind.INTEGER_DIVIDE, NodeKind.MODULO):
            value = self.evaluate_integer_divide(node)
        elif kind in self.comparison_ops:
            value = self.evaluate_comparison(node)
        else:  # pragma: no cover
            raise NotImplementedError(str(node))
        return value

    def evaluate_variable(self, node):
        entry = node.symbol
        if entry is None:
            entry = self.symbol_table.lookup(node.text)
        if entry is None:
            self.error("Undeclared variable {}".format(node.text), node)
        if not entry.is_assigned:
            self.error("Variable {} has no value".format(node.text), node)
        return entry.value

    def evaluate_boolean(self, node):
        """ Evaluate an expression which must give a boolean """
        value = self.evaluate(node)
        if not value.is_boolean:
            self.error("Expected boolean value", node)
        return value.data

    def evaluate_integer(self, node):
        """ Evaluate an expression which must give an integer """
        value = self.evaluate(node)
        if value.kind is not ValueKind.INTEGER:
            self.error("Expected integer value", node)
        return value.data

    def evaluate_operands(self, node):
        lhs, rhs = node.children
        return self.evaluate(lhs), self.evaluate(rhs)

    def require_numeric(self, node, *values):
        if not all(value.is_numeric for value in values):
            self.error("Expected numeric operands", node)

    def evaluate_negate(self, node):
        operand = self.evaluate(node.children[0])
        self.require_numeric(node, operand)
        return Value(operand.kind, -operand.data)

    def evaluate_logical(self, node):
        """ Evaluate 'and' or 'or', skipping the right operand when
        the left operand decides the outcome """
        lhs = self.evaluate_boolean(node.children[0])
        if node.kind is NodeKind.AND and not lhs:
            return Value.boolean(False)
        if node.kind is NodeKind.OR and lhs:
            return Value.boolean(True)
        return Value.boolean(self.evaluate_boolean(node.children[1]))

    def evaluate_arithmetic(self, node):
        lhs, rhs = self.evaluate_operands(node)
        if node.kind is NodeKind.ADD and lhs.is_text and rhs.is_text:
            return Value.text(lhs.data + rhs.data)
        self.require_numeric(node, lhs, rhs)
        lhs, rhs = promote_pair(lhs, rhs)
        result = self.arithmetic_ops[node.kind](lhs.data, rhs.data)
        return Value(lhs.kind, result)

    def evaluate_divide(self, node):
        """ Real division, also for integer operands """
        lhs, rhs = self.evaluate_operands(node)
        self.require_numeric(node, lhs, rhs)
        if rhs.data == 0:
            self.error("Division by zero", node)
        return Value.real(lhs.data / rhs.data)

    def evaluate_integer_divide(self, node):
        """ Evaluate div and mod.

        The quotient is truncated toward zero, the remainder has the
        sign of the dividend.
        """
        lhs, rhs = self.evaluate_operands(node)
        if not (
            lhs.kind is ValueKind.INTEGER and rhs.kind is ValueKind.INTEGER
        ):
            self.error("Expected integer operands", node)
        if rhs.data == 0:
            self.error("Division by zero", node)

        quotient = abs(lhs.data) // abs(rhs.data)
        if (lhs.data < 0) != (rhs.data < 0):
            quotient = -quotient

        if node.kind is NodeKind.INTEGER_DIVIDE:
            return Value.integer(quotient)
        return Value.integer(lhs.data - rhs.data * quotient)

    def evaluate_comparison(self, node):
        lhs, rhs = self.evaluate_operands(node)
        if lhs.is_numeric and rhs.is_numeric:
            lhs, rhs = promote_pair(lhs, rhs)
        elif lhs.kind is not rhs.kind:
            self.error("Incompatible operands in comparison", node)
        result = self.comparison_ops[node.kind](lhs.data, rhs.data)
        return Value.boolean(result)
