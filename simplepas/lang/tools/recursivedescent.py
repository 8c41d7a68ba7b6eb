from ...common import ParseError


def make_comma_or(parts):
    parts = list(map(lambda x: f'"{x}"', parts))
    if len(parts) > 1:
        last = parts[-1]
        first = parts[:-1]
        return ", ".join(first) + " or " + last
    else:
        return "".join(parts)


class RecursiveDescentParser:
    """Base class for recursive descent parsers.

    Tokens are pulled one at a time from a lexer, the current token is the
    single token of look-ahead. Syntax errors are raised as ParseError and
    can be recovered from by skipping tokens with synchronize.
    """

    def __init__(self):
        self.token = None  # The current token under cursor
        self.lexer = None

    def init_lexer(self, lexer):
        """Initialize the parser with the given lexer"""
        self.lexer = lexer
        self.token = lexer.next_token()

    def error(self, msg, loc=None, context=None):
        """Raise an error at the given location"""
        if loc is None:
            loc = self.token.loc
            if context is None:
                context = self.token.text
        raise ParseError(msg, loc, context)

    @property
    def current_location(self):
        return self.token.loc

    # Lexer helpers:
    def consume(self, typ=None):
        """Assert that the next token is typ, and if so, return it.

        If typ is a list or tuple, consume one of the given types.
        If typ is not given, consume the next token.
        """
        if typ is None:
            return self.next_token()

        expected_types = typ if isinstance(typ, (list, tuple, set)) else [typ]
        if self.peek in expected_types:
            return self.next_token()
        else:
            expected = make_comma_or(expected_types)
            self.error(f"Expected {expected}")

    def has_consumed(self, typ) -> bool:
        """Checks if the look-ahead token is of type typ, and if so
        eats the token and returns true"""
        if self.peek == typ:
            self.next_token()
            return True
        return False

    def next_token(self):
        """Advance to the next token"""
        tok = self.token
        self.token = self.lexer.next_token()
        return tok

    def synchronize(self, followers):
        """Skip tokens until one of the given types is under the cursor"""
        assert "EOF" in followers
        while self.peek not in followers:
            self.next_token()

    @property
    def peek(self):
        """Look at the next token to parse without popping it"""
        if self.token:
            return self.token.typ

    @property
    def at_end(self):
        return self.peek == "EOF"
