import logging
from ...common import CompilerError
from .lexer import Lexer
from .parser import Parser
from .source import Source
from .symbol_table import SymbolTable


class PascalBuilder:
    """ Turns pascal source into a program tree and a symbol table. """
    logger = logging.getLogger('pascal-builder')

    def __init__(self, diag):
        self.diag = diag

    def build(self, source_file):
        """ Build the given source file.

        Raises compiler error when the source has syntax errors. Other
        errors are only reported to the diagnostics manager.
        """
        source = Source.from_file(source_file)
        self.diag.add_source(source.filename, source.text)
        self.logger.debug('Building %s', source.filename or '<input>')

        symbol_table = SymbolTable()
        lexer = Lexer(source, self.diag)
        parser = Parser(self.diag, symbol_table)
        program, error_count = parser.parse_program(lexer)

        if self.diag.has_syntax_errors:
            raise CompilerError(
                'Parsing failed with {} errors'.format(error_count))

        self.logger.debug('build complete!')
        return program, symbol_table
