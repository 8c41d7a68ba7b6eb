""" Runtime values of the interpreter.

Every expression evaluates to a Value, which is a datum tagged with one
of the ValueKind members. Booleans have their own tag and are never
represented by numbers or text.
"""

import decimal
import enum


class ValueKind(enum.Enum):
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    TEXT = "text"


class Value:
    """ A tagged runtime datum """

    __slots__ = ["kind", "data"]

    # Numeric promotion order:
    ranks = {ValueKind.INTEGER: 0, ValueKind.REAL: 1}

    def __init__(self, kind, data):
        assert isinstance(kind, ValueKind)
        self.kind = kind
        self.data = data

    @classmethod
    def integer(cls, data):
        return cls(ValueKind.INTEGER, int(data))

    @classmethod
    def real(cls, data):
        return cls(ValueKind.REAL, float(data))

    @classmethod
    def boolean(cls, data):
        return cls(ValueKind.BOOLEAN, bool(data))

    @classmethod
    def text(cls, data):
        return cls(ValueKind.TEXT, str(data))

    @property
    def is_numeric(self):
        return self.kind in self.ranks

    @property
    def is_boolean(self):
        return self.kind is ValueKind.BOOLEAN

    @property
    def is_text(self):
        return self.kind is ValueKind.TEXT

    def promote(self, kind):
        """ Convert a numeric value to the given numeric kind """
        assert self.is_numeric
        if kind is ValueKind.REAL:
            return Value.real(self.data)
        return self

    def __eq__(self, other):
        if isinstance(other, Value):
            return self.kind is other.kind and self.data == other.data
        return NotImplemented

    def __hash__(self):
        return hash((self.kind, self.data))

    def __repr__(self):
        return "Value({}, {!r})".format(self.kind.value, self.data)

    def __str__(self):
        return format_value(self)


def common_kind(a, b):
    """ Determine the numeric kind both operands are promoted to """
    if Value.ranks[a.kind] >= Value.ranks[b.kind]:
        return a.kind
    return b.kind


def promote_pair(a, b):
    """ Promote two numeric values to their common kind """
    kind = common_kind(a, b)
    return a.promote(kind), b.promote(kind)


def format_value(value, width=None, decimals=None):
    """ Format a value the way pascal write does.

    Integers are written in decimal, reals with the digits of their
    shortest repr in positional notation or with a fixed number of
    decimals, booleans as TRUE or FALSE and text verbatim. The result is
    right-justified in the field width.
    """
    if value.is_numeric and decimals is not None:
        text = "{0:.{1}f}".format(float(value.data), max(decimals, 0))
    elif value.kind is ValueKind.INTEGER:
        text = "{}".format(value.data)
    elif value.kind is ValueKind.REAL:
        text = repr(value.data)
        if "e" in text:
            # Write in positional notation, not in exponent notation:
            text = format(decimal.Decimal(text), "f")
            if "." not in text:
                text += ".0"
    elif value.kind is ValueKind.BOOLEAN:
        text = "TRUE" if value.data else "FALSE"
    else:
        text = value.data

    if width is not None:
        text = text.rjust(width)
    return text
