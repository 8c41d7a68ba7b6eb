""" Lexer for pascal. """

import enum
import logging
import string
from ...common import TokenError
from ..common import Token
from .source import EOF


class LiteralState(enum.Enum):
    """ States of the quoted literal scanner """

    IN_LITERAL = 1
    SAW_QUOTE = 2
    DONE = 3


class Lexer:
    """ Generates a sequence of tokens from a character source """

    logger = logging.getLogger("pascal.lexer")

    keywords = [
        "and",
        "begin",
        "case",
        "div",
        "do",
        "downto",
        "else",
        "end",
        "for",
        "if",
        "mod",
        "not",
        "of",
        "or",
        "program",
        "read",
        "readln",
        "repeat",
        "then",
        "to",
        "until",
        "while",
        "write",
        "writeln",
    ]
    double_glyphs = (":=", "<>", "<=", ">=", "..")
    single_glyphs = (
        ",",
        ";",
        "(",
        ")",
        ".",
        ":",
        "<",
        ">",
        "=",
        "-",
        "+",
        "*",
        "/",
    )

    def __init__(self, source, diag):
        self.source = source
        self.diag = diag
        self.logger.debug("Scanning %s", source.filename or "<input>")

    def tokenize(self):
        """ Generate all tokens up to and including the EOF token """
        while True:
            token = self.next_token()
            yield token
            if token.typ == "EOF":
                break

    def next_token(self):
        """ Scan the next token from the source.

        At the end of the text an EOF token is returned, as many times
        as this function is called.
        """
        error = self.skip_blanks()
        if error:
            return error

        char = self.source.current_char()
        if char is EOF:
            loc = self.source.location(0)
            return Token("EOF", "EOF", loc, "")
        elif char.isalpha():
            return self.scan_word()
        elif char in string.digits:
            return self.scan_number()
        elif char == "'":
            return self.scan_quoted()
        else:
            return self.scan_special()

    def skip_blanks(self):
        """ Skip whitespace and comments.

        Returns an error token when a comment is not closed.
        """
        while True:
            char = self.source.current_char()
            if char is EOF:
                return
            elif char.isspace():
                self.source.next_char()
            elif char == "{":
                loc = self.source.location()
                if not self.skip_comment("}"):
                    return self.error("Comment not closed", loc, "{")
            elif char == "(" and self.source.peek_char() == "*":
                loc = self.source.location()
                self.source.next_char()
                if not self.skip_comment("*)"):
                    return self.error("Comment not closed", loc, "(*")
            else:
                return

    def skip_comment(self, terminator):
        """ Skip until after the terminator, return False at EOF """
        char = self.source.next_char()
        while char is not EOF:
            if char == terminator[0]:
                if len(terminator) == 1:
                    self.source.next_char()
                    return True
                elif self.source.peek_char() == terminator[1]:
                    self.source.next_char()
                    self.source.next_char()
                    return True
            char = self.source.next_char()
        return False

    def scan_word(self):
        """ Scan a reserved word or an identifier """
        loc = self.source.location()
        chars = [self.source.current_char()]
        char = self.source.next_char()
        while char is not EOF and (char.isalnum() or char == "_"):
            chars.append(char)
            char = self.source.next_char()
        text = "".join(chars)
        loc.length = len(text)

        val = text.lower()
        if val in self.keywords:
            typ = val
        else:
            typ = "ID"
        return Token(typ, val, loc, text)

    def scan_number(self):
        """ Scan an integer or a real number.

        Digits and dots are accumulated, the number of dots decides
        the kind of number.
        """
        loc = self.source.location()
        chars = [self.source.current_char()]
        char = self.source.next_char()
        while char is not EOF and (char in string.digits or char == "."):
            chars.append(char)
            char = self.source.next_char()
        text = "".join(chars)
        loc.length = len(text)

        point_count = text.count(".")
        if point_count == 0:
            return Token("INTEGER", int(text), loc, text)
        elif point_count == 1 and not text.endswith("."):
            return Token("REAL", float(text), loc, text)
        else:
            return self.error("Invalid number", loc, text)

    def scan_quoted(self):
        """ Scan a character or string literal.

        A doubled quote inside the literal denotes a single quote.
        """
        loc = self.source.location()
        text = ["'"]
        payload = []
        state = LiteralState.IN_LITERAL
        char = self.source.next_char()  # consume the opening quote
        while state is not LiteralState.DONE:
            if state is LiteralState.IN_LITERAL:
                if char is EOF:
                    break
                text.append(char)
                if char == "'":
                    state = LiteralState.SAW_QUOTE
                else:
                    payload.append(char)
                char = self.source.next_char()
            elif char == "'":
                # A doubled quote, stay in the literal:
                text.append(char)
                payload.append(char)
                state = LiteralState.IN_LITERAL
                char = self.source.next_char()
            else:
                state = LiteralState.DONE

        text = "".join(text)
        loc.length = len(text)
        if state is not LiteralState.DONE:
            return self.error("String not closed", loc, text)

        val = "".join(payload)
        typ = "CHARACTER" if len(val) == 1 else "STRING"
        return Token(typ, val, loc, text)

    def scan_special(self):
        """ Scan a one or two character symbol """
        loc = self.source.location()
        char = self.source.current_char()
        pair = char + (self.source.peek_char() or "")
        if pair in self.double_glyphs:
            self.source.next_char()
            self.source.next_char()
            loc.length = 2
            return Token(pair, pair, loc)
        elif char in self.single_glyphs:
            self.source.next_char()
            return Token(char, char, loc)
        else:
            self.source.next_char()
            return self.error("Invalid token", loc, char)

    def error(self, msg, loc, text):
        """ Report a token error and return an error token """
        self.diag.add_diag(TokenError(msg, loc, text))
        return Token("ERROR", text, loc, text)
