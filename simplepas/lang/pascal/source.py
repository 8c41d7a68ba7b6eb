""" Character supplier for the lexer. """

from ..common import SourceLocation

# Sentinel returned when the end of the text is reached:
EOF = None


class Source:
    """ A text with a cursor on the current character.

    Rows and columns are 1-based. The row is advanced when the cursor
    moves past a newline character.
    """

    def __init__(self, text, filename=""):
        self.text = text
        self.filename = filename
        self.pos = 0
        self.row = 1
        self.col = 1

    @classmethod
    def from_file(cls, input_file):
        """ Read all text from an opened file and close it """
        filename = input_file.name if hasattr(input_file, "name") else ""
        text = input_file.read()
        input_file.close()
        return cls(text, filename)

    def current_char(self):
        """ The character under the cursor, or EOF """
        if self.pos < len(self.text):
            return self.text[self.pos]
        return EOF

    def next_char(self):
        """ Advance the cursor and return the new current character """
        char = self.current_char()
        if char is not EOF:
            if char == "\n":
                self.row += 1
                self.col = 1
            else:
                self.col += 1
            self.pos += 1
        return self.current_char()

    def peek_char(self):
        """ Look at the character after the current one """
        if self.pos + 1 < len(self.text):
            return self.text[self.pos + 1]
        return EOF

    def line_number(self):
        return self.row

    def location(self, length=1):
        """ Location of the character under the cursor """
        return SourceLocation(self.filename, self.row, self.col, length)

    def __repr__(self):
        return "<Source {!r} at {}:{}>".format(
            self.filename, self.row, self.col
        )
