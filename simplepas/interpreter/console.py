""" Console collaborators of the interpreter.

The executor hands formatted text to an output object with an emit
method, and asks an input object for scalar values.
"""

import re
import sys
from .values import Value


class StreamOutput:
    """ Writes emitted text to a file, by default standard output """

    def __init__(self, f=None):
        self.f = f

    def emit(self, text: str):
        f = sys.stdout if self.f is None else self.f
        f.write(text)


class BufferedOutput:
    """ Collects emitted text """

    def __init__(self):
        self.parts = []

    def emit(self, text: str):
        self.parts.append(text)

    def getvalue(self):
        return "".join(self.parts)


class StreamInput:
    """ Reads whitespace separated values from a file.

    Values are typed by their text: integer and real numbers, the words
    true and false, and anything else as text.
    """

    integer_pattern = re.compile(r"[-+]?\d+$")
    real_pattern = re.compile(r"[-+]?\d+\.\d+$")

    def __init__(self, f=None):
        self.f = f
        self.words = []
        self.line_open = False
        self.at_eof = False

    def read_line(self):
        f = sys.stdin if self.f is None else self.f
        line = f.readline()
        if not line:
            self.at_eof = True
        self.line_open = True
        return line

    def read_value(self):
        """ Get the next value, or None at the end of the input """
        while not self.words:
            if self.at_eof:
                return
            self.words = self.read_line().split()
        word = self.words.pop(0)
        return self.make_value(word)

    def skip_line(self):
        """ Discard what is left of the current line """
        if not self.line_open and not self.at_eof:
            self.read_line()
        self.words = []
        self.line_open = False

    def make_value(self, word):
        if self.integer_pattern.match(word):
            return Value.integer(word)
        elif self.real_pattern.match(word):
            return Value.real(word)
        elif word.lower() in ("true", "false"):
            return Value.boolean(word.lower() == "true")
        else:
            return Value.text(word)
