"""
   Error handling routines
   Diagnostic utils
   Source location structures
"""


import logging
from .lang.common import SourceLocation


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class CompilerError(Exception):
    """ An error with an optional location and offending source text """
    kind = 'ERROR'

    def __init__(self, msg, loc=None, context=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        self.context = context
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    @property
    def line(self):
        return self.loc.row if self.loc else 0

    def summary(self):
        """ Single line description, like: 'line 3: Missing ; at 'x'' """
        text = self.msg
        if self.context is not None:
            text += " at '{}'".format(self.context)
        if self.loc:
            text = 'line {}: {}'.format(self.loc.row, text)
        return text


class TokenError(CompilerError):
    """ Malformed literal or unrecognized character """
    kind = 'TOKEN ERROR'


class ParseError(CompilerError):
    """ Syntax error """
    kind = 'SYNTAX ERROR'


class SemanticError(CompilerError):
    """ Reference to an undeclared identifier """
    kind = 'SEMANTIC ERROR'


class ExecutionError(CompilerError):
    """ Error raised while executing a program """
    kind = 'RUNTIME ERROR'


class DiagnosticsManager:
    def __init__(self):
        self.diags = []
        self.sources = {}
        self.logger = logging.getLogger('diagnostics')

    def add_source(self, name, src):
        """ Add a source for error reporting """
        self.logger.debug('Adding source, filename="%s"', name)
        self.sources[name] = src

    def add_diag(self, d):
        """ Add a diagnostic message """
        if d.loc:
            self.logger.error('Line %s: %s', d.loc.row, d.msg)
        else:
            self.logger.error(str(d.msg))
        self.diags.append(d)

    @property
    def error_count(self):
        return len(self.diags)

    @property
    def has_syntax_errors(self):
        """ True when some error left a hole in the parsed tree """
        return any(
            isinstance(d, (TokenError, ParseError)) for d in self.diags)

    def clear(self):
        del self.diags[:]
        self.sources.clear()

    def print_errors(self, file=None):
        """ Print all errors reported """
        if len(self.diags) > 0:
            print('{0} Errors'.format(len(self.diags)), file=file)
            for d in self.diags:
                self.print_error(d, file=file)

    def print_error(self, e, file=None):
        """ Print a single error in a nice formatted way """
        print('{}: {}'.format(e.kind, e.summary()), file=file)
        if e.loc and e.loc.filename in self.sources:
            source = self.sources[e.loc.filename]
            lines = source.split('\n')
            e.loc.print_message(e.msg, lines=lines, file=file)
