""" Pascal AST nodes.

The tree consists of a single node class, tagged with a NodeKind. Each
node owns its children, the order of the children is significant:

- PROGRAM: [compound]
- COMPOUND: [statement...]
- ASSIGN: [variable, expression]
- LOOP: [statement or TEST...], the loop ends when a TEST is true
- TEST: [condition]
- IF: [condition, then-statement, else-statement?]
- CASE: [selector, CASE_BRANCH...]
- CASE_BRANCH: [constant..., statement], no constants means 'else'
- WRITE, WRITELN: [expression or FORMAT...]
- FORMAT: [expression, width, decimals?]
- READ, READLN: [variable...]
- operators: [operand] or [left, right]
"""

import enum


class NodeKind(enum.Enum):
    # Statements:
    PROGRAM = "PROGRAM"
    COMPOUND = "COMPOUND"
    ASSIGN = "ASSIGN"
    LOOP = "LOOP"
    TEST = "TEST"
    IF = "IF"
    CASE = "CASE"
    CASE_BRANCH = "CASE_BRANCH"
    WRITE = "WRITE"
    WRITELN = "WRITELN"
    FORMAT = "FORMAT"
    READ = "READ"
    READLN = "READLN"

    # Operators:
    NOT = "NOT"
    NEGATE = "NEGATE"
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    INTEGER_DIVIDE = "INTEGER_DIVIDE"
    MODULO = "MODULO"
    AND = "AND"
    OR = "OR"
    EQ = "EQ"
    NE = "NE"
    LT = "LT"
    LE = "LE"
    GT = "GT"
    GE = "GE"

    # Leaves:
    VARIABLE = "VARIABLE"
    INTEGER_CONSTANT = "INTEGER_CONSTANT"
    REAL_CONSTANT = "REAL_CONSTANT"
    STRING_CONSTANT = "STRING_CONSTANT"


class Node:
    """ A single node of the program tree """

    def __init__(
        self, kind, location=None, text=None, value=None, symbol=None
    ):
        assert isinstance(kind, NodeKind)
        self.kind = kind
        self.location = location
        self.text = text
        self.value = value
        self.symbol = symbol
        self.children = []

    @property
    def line(self):
        return self.location.row if self.location else 0

    def adopt(self, child):
        """ Append a child node """
        assert isinstance(child, Node)
        self.children.append(child)
        return child

    def __iter__(self):
        return iter(self.children)

    def __repr__(self):
        if self.kind is NodeKind.VARIABLE:
            return "VARIABLE {}".format(self.text)
        elif self.value is not None:
            return "{} {!r}".format(self.kind.value, self.value)
        return self.kind.value
