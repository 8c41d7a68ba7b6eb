""" A recursive descent pascal parser. """

import logging
from ...common import ParseError, SemanticError
from ...interpreter.values import Value
from ..tools.recursivedescent import RecursiveDescentParser
from .nodes import Node, NodeKind
from .symbol_table import SymbolTable


class Parser(RecursiveDescentParser):
    """ Parses pascal into a tree of nodes.

    Identifiers are bound to symbol table entries while parsing. Syntax
    errors are reported to the diagnostics manager, after which tokens
    are skipped up to a statement follower, so that the rest of the
    program is still checked.
    """

    logger = logging.getLogger("pascal.parser")

    # Tokens that can start a statement:
    statement_starters = frozenset(
        [
            "begin",
            "ID",
            "repeat",
            "while",
            "for",
            "if",
            "case",
            "write",
            "writeln",
            "read",
            "readln",
        ]
    )

    # Tokens that can follow a statement:
    statement_followers = frozenset([";", "end", "until", "EOF"])
    loop_followers = statement_followers | {"do", "to", "downto"}

    relational_operators = {
        "=": NodeKind.EQ,
        "<>": NodeKind.NE,
        "<": NodeKind.LT,
        "<=": NodeKind.LE,
        ">": NodeKind.GT,
        ">=": NodeKind.GE,
    }

    additive_operators = {
        "+": NodeKind.ADD,
        "-": NodeKind.SUBTRACT,
        "or": NodeKind.OR,
    }

    multiplicative_operators = {
        "*": NodeKind.MULTIPLY,
        "/": NodeKind.DIVIDE,
        "div": NodeKind.INTEGER_DIVIDE,
        "mod": NodeKind.MODULO,
        "and": NodeKind.AND,
    }

    def __init__(self, diag, symbol_table=None):
        super().__init__()
        self.diag = diag
        if symbol_table is None:
            symbol_table = SymbolTable()
        self.symbol_table = symbol_table

    def report(self, error):
        """ Report an error and continue parsing """
        self.diag.add_diag(error)

    def report_syntax_error(self, msg):
        """ Report a syntax error at the current token """
        self.report(ParseError(msg, self.token.loc, self.token.text))

    def parse_program(self, lexer):
        """ Parse a program.

        Returns the program node and the number of errors found.
        """
        start_count = self.diag.error_count
        self.init_lexer(lexer)
        program = Node(NodeKind.PROGRAM, self.current_location)
        try:
            self.consume("program")
            name = self.consume("ID")
            program.text = name.text
            self.logger.debug("Parsing program %s", name.text)
            if self.has_consumed("("):
                self.parse_id_sequence()
                self.consume(")")
            self.consume(";")
        except ParseError as ex:
            self.report(ex)
            self.synchronize({"begin", "EOF"})

        try:
            program.adopt(self.parse_compound_statement())
            if self.has_consumed("."):
                if not self.at_end:
                    self.error("Expected end of input")
            elif not self.at_end:
                self.error('Expected "."')
        except ParseError as ex:
            self.report(ex)

        error_count = self.diag.error_count - start_count
        self.logger.debug("Parsing complete with %d errors", error_count)
        return program, error_count

    def parse_id_sequence(self):
        """ Parse one or more identifiers seperated by ',' """
        ids = [self.consume("ID")]
        while self.has_consumed(","):
            ids.append(self.consume("ID"))
        return ids

    def declare(self, name):
        """ Get the entry for a variable that is written to.

        Variables are declared by assigning to them.
        """
        entry = self.symbol_table.lookup(name.val)
        if entry is None:
            self.logger.debug(
                "Declaring %s at line %d", name.text, name.loc.row
            )
            entry = self.symbol_table.enter(name.val)
        return entry

    def parse_target(self):
        """ Parse a variable which will receive a value """
        name = self.consume("ID")
        entry = self.declare(name)
        return Node(NodeKind.VARIABLE, name.loc, name.text, symbol=entry)

    def parse_variable(self):
        """ Parse a variable whose value is read """
        name = self.consume("ID")
        entry = self.symbol_table.lookup(name.val)
        if entry is None:
            self.report(
                SemanticError("Undeclared identifier", name.loc, name.text)
            )
        return Node(NodeKind.VARIABLE, name.loc, name.text, symbol=entry)

    # Statements
    def parse_statement_list(self, parent, terminator):
        """ Parse statements seperated by ';' up to the terminator.

        The statements are adopted by the parent node.
        """
        while self.peek not in (terminator, "EOF"):
            try:
                statement = self.parse_statement()
            except ParseError as ex:
                self.report(ex)
                self.synchronize(self.statement_followers)
                statement = None

            if statement is not None:
                parent.adopt(statement)

            # A semicolon separates statements:
            if self.peek == ";":
                while self.has_consumed(";"):
                    pass
            elif self.peek in self.statement_starters:
                self.report_syntax_error("Missing ;")
            elif self.peek not in (terminator, "EOF"):
                self.report_syntax_error("Unexpected token")
                if self.peek in self.statement_followers:
                    self.next_token()
                else:
                    self.synchronize(self.statement_followers)

    def parse_statement(self):
        """ Determine statement type based on the pending token.

        Returns None for the empty statement.
        """
        if self.peek == "ID":
            statement = self.parse_assignment()
        elif self.peek == "begin":
            statement = self.parse_compound_statement()
        elif self.peek == "repeat":
            statement = self.parse_repeat()
        elif self.peek == "while":
            statement = self.parse_while()
        elif self.peek == "for":
            statement = self.parse_for()
        elif self.peek == "if":
            statement = self.parse_if_statement()
        elif self.peek == "case":
            statement = self.parse_case_of()
        elif self.peek in ["write", "writeln"]:
            statement = self.parse_write()
        elif self.peek in ["read", "readln"]:
            statement = self.parse_read()
        elif self.peek in self.statement_followers or self.peek == "else":
            statement = None
        else:
            self.error("Unexpected token")
        return statement

    def parse_compound_statement(self):
        """ Parse a compound statement """
        location = self.consume("begin").loc
        compound = Node(NodeKind.COMPOUND, location)
        self.parse_statement_list(compound, "end")
        self.consume("end")
        return compound

    def parse_branch(self, location):
        """ Parse a statement, an empty statement gives an empty compound """
        statement = self.parse_statement()
        if statement is None:
            statement = Node(NodeKind.COMPOUND, location)
        return statement

    def parse_assignment(self):
        target = self.parse_target()
        self.consume(":=")
        assignment = Node(NodeKind.ASSIGN, target.location)
        assignment.adopt(target)
        assignment.adopt(self.parse_expression())
        return assignment

    def parse_repeat(self):
        """ Parses a repeat statement.

        The loop node contains the statements followed by the test.
        """
        location = self.consume("repeat").loc
        loop = Node(NodeKind.LOOP, location)
        self.parse_statement_list(loop, "until")
        test = Node(NodeKind.TEST, self.consume("until").loc)
        test.adopt(self.parse_expression())
        loop.adopt(test)
        return loop

    def parse_while(self):
        """ Parses a while statement.

        The loop node starts with a test on the negated condition,
        followed by the statement.
        """
        location = self.consume("while").loc
        try:
            condition = self.parse_expression()
        except ParseError as ex:
            self.report(ex)
            self.synchronize(self.loop_followers)
            condition = None
            if self.peek in self.statement_followers:
                return
        self.consume("do")
        statement = self.parse_statement()
        if condition is None:
            return

        loop = Node(NodeKind.LOOP, location)
        test = loop.adopt(Node(NodeKind.TEST, location))
        negation = test.adopt(Node(NodeKind.NOT, location))
        negation.adopt(condition)
        if statement is not None:
            loop.adopt(statement)
        return loop

    def parse_for(self):
        """ Parse a for statement.

        The for loop is translated into an assignment of the start value
        to the control variable, followed by a loop which compares the
        variable with the stop value before each iteration, and which
        steps the variable after the statement.
        """
        location = self.consume("for").loc
        header_ok = True
        try:
            name = self.consume("ID")
            entry = self.declare(name)
            self.consume(":=")
            start = self.parse_expression()
        except ParseError as ex:
            self.report(ex)
            self.synchronize(self.loop_followers)
            header_ok = False
            if self.peek in self.statement_followers:
                return

        if header_ok or self.peek != "do":
            try:
                up = self.consume(["to", "downto"]).typ == "to"
                stop = self.parse_expression()
            except ParseError as ex:
                self.report(ex)
                self.synchronize(self.statement_followers | {"do"})
                header_ok = False
                if self.peek != "do":
                    return

        self.consume("do")
        statement = self.parse_statement()
        if not header_ok:
            return

        def control_variable():
            return Node(NodeKind.VARIABLE, name.loc, name.text, symbol=entry)

        compound = Node(NodeKind.COMPOUND, location)
        initial = compound.adopt(Node(NodeKind.ASSIGN, location))
        initial.adopt(control_variable())
        initial.adopt(start)

        loop = compound.adopt(Node(NodeKind.LOOP, location))
        test = loop.adopt(Node(NodeKind.TEST, location))
        beyond = test.adopt(
            Node(NodeKind.GT if up else NodeKind.LT, location)
        )
        beyond.adopt(control_variable())
        beyond.adopt(stop)

        if statement is not None:
            loop.adopt(statement)

        step = loop.adopt(Node(NodeKind.ASSIGN, location))
        step.adopt(control_variable())
        next_value = step.adopt(
            Node(NodeKind.ADD if up else NodeKind.SUBTRACT, location)
        )
        next_value.adopt(control_variable())
        next_value.adopt(
            Node(NodeKind.INTEGER_CONSTANT, location, "1", Value.integer(1))
        )
        return compound

    def parse_if_statement(self):
        """ Parse if statement """
        location = self.consume("if").loc
        if_statement = Node(NodeKind.IF, location)
        if_statement.adopt(self.parse_expression())
        then_location = self.consume("then").loc
        if_statement.adopt(self.parse_branch(then_location))
        if self.peek == "else":
            else_location = self.consume("else").loc
            if_statement.adopt(self.parse_branch(else_location))
        return if_statement

    def parse_case_of(self):
        """ Parse case-of statement.

        Each branch becomes a node with the constants followed by the
        statement. An else part is a branch without constants.
        """
        location = self.consume("case").loc
        case = Node(NodeKind.CASE, location)
        case.adopt(self.parse_expression())
        self.consume("of")

        seen = set()
        while self.peek not in ["end", "else", "EOF"]:
            case.adopt(self.parse_case_branch(seen))
            if self.peek == ";":
                while self.has_consumed(";"):
                    pass
            elif self.peek in ["INTEGER", "+", "-"]:
                self.report_syntax_error("Missing ;")
            elif self.peek not in ["end", "else"]:
                self.error("Unexpected token")

        # Optional else clause:
        if self.peek == "else":
            default = Node(NodeKind.CASE_BRANCH, self.consume("else").loc)
            statements = default.adopt(
                Node(NodeKind.COMPOUND, default.location)
            )
            self.parse_statement_list(statements, "end")
            case.adopt(default)

        self.consume("end")
        return case

    def parse_case_branch(self, seen):
        """ Parse the constants and the statement of a single branch """
        branch = Node(NodeKind.CASE_BRANCH, self.current_location)
        while True:
            constant = self.parse_case_constant()
            if constant.value.data in seen:
                self.logger.warning(
                    "Line %d: duplicate case constant %s",
                    constant.line,
                    constant.value.data,
                )
            seen.add(constant.value.data)
            branch.adopt(constant)
            if not self.has_consumed(","):
                break

        location = self.consume(":").loc
        branch.adopt(self.parse_branch(location))
        return branch

    def parse_case_constant(self):
        """ Parse an integer constant with optional sign """
        location = self.current_location
        sign = ""
        if self.peek in ["+", "-"]:
            sign = self.consume().typ
        number = self.consume("INTEGER")
        value = -number.val if sign == "-" else number.val
        return Node(
            NodeKind.INTEGER_CONSTANT,
            location,
            sign + number.text,
            Value.integer(value),
        )

    def parse_write(self):
        """ Parse write or writeln statement """
        keyword = self.consume(["write", "writeln"])
        if keyword.typ == "write":
            write = Node(NodeKind.WRITE, keyword.loc)
        else:
            write = Node(NodeKind.WRITELN, keyword.loc)

        if write.kind is NodeKind.WRITE or self.peek == "(":
            self.consume("(")
            if write.kind is NodeKind.WRITE or self.peek != ")":
                write.adopt(self.parse_write_argument())
                while self.has_consumed(","):
                    write.adopt(self.parse_write_argument())
            self.consume(")")
        return write

    def parse_write_argument(self):
        """ Parse an expression with optional width and decimals """
        expression = self.parse_expression()
        if self.peek == ":":
            location = self.consume(":").loc
            argument = Node(NodeKind.FORMAT, location)
            argument.adopt(expression)
            argument.adopt(self.parse_expression())
            if self.has_consumed(":"):
                argument.adopt(self.parse_expression())
            return argument
        return expression

    def parse_read(self):
        """ Parse read or readln statement """
        keyword = self.consume(["read", "readln"])
        if keyword.typ == "read":
            read = Node(NodeKind.READ, keyword.loc)
        else:
            read = Node(NodeKind.READLN, keyword.loc)

        if read.kind is NodeKind.READ or self.peek == "(":
            self.consume("(")
            read.adopt(self.parse_target())
            while self.has_consumed(","):
                read.adopt(self.parse_target())
            self.consume(")")
        return read

    # Expressions
    def parse_expression(self):
        """ Parse an expression with an optional relational operator """
        lhs = self.parse_simple_expression()
        if self.peek in self.relational_operators:
            lhs = self.parse_binop(
                lhs, self.relational_operators, self.parse_simple_expression
            )
        return lhs

    def parse_simple_expression(self):
        """ Parse terms seperated by additive operators """
        if self.peek in ["+", "-"]:
            sign = self.consume()
            lhs = self.parse_term()
            if sign.typ == "-":
                negation = Node(NodeKind.NEGATE, sign.loc)
                negation.adopt(lhs)
                lhs = negation
        else:
            lhs = self.parse_term()

        while self.peek in self.additive_operators:
            lhs = self.parse_binop(
                lhs, self.additive_operators, self.parse_term
            )
        return lhs

    def parse_term(self):
        """ Parse factors seperated by multiplicative operators """
        lhs = self.parse_factor()
        while self.peek in self.multiplicative_operators:
            lhs = self.parse_binop(
                lhs, self.multiplicative_operators, self.parse_factor
            )
        return lhs

    def parse_binop(self, lhs, operators, parse_operand):
        """ Make lhs the left operand of the pending operator """
        operator = self.consume()
        binop = Node(operators[operator.typ], operator.loc)
        binop.adopt(lhs)
        binop.adopt(parse_operand())
        return binop

    def parse_factor(self):
        """ Literal, variable and parenthesis expression parsing """
        if self.peek == "ID":
            expr = self.parse_variable()
        elif self.peek == "INTEGER":
            val = self.consume("INTEGER")
            expr = Node(
                NodeKind.INTEGER_CONSTANT,
                val.loc,
                val.text,
                Value.integer(val.val),
            )
        elif self.peek == "REAL":
            val = self.consume("REAL")
            expr = Node(
                NodeKind.REAL_CONSTANT, val.loc, val.text, Value.real(val.val)
            )
        elif self.peek in ["STRING", "CHARACTER"]:
            val = self.consume()
            expr = Node(
                NodeKind.STRING_CONSTANT,
                val.loc,
                val.text,
                Value.text(val.val),
            )
        elif self.peek == "not":
            location = self.consume("not").loc
            expr = Node(NodeKind.NOT, location)
            expr.adopt(self.parse_factor())
        elif self.peek == "(":
            self.consume("(")
            expr = self.parse_expression()
            self.consume(")")
        else:
            self.error("Unexpected token")
        return expr
