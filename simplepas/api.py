"""
The api module contains a set of handy functions to parse and run pascal
programs.
"""

from .common import DiagnosticsManager, get_file
from .lang.pascal import PascalBuilder
from .interpreter import Executor, StreamInput, StreamOutput


def parse_pascal(source, diag=None):
    """ Parse a pascal program.

    Args:
        source: a filename or a file like object.
        diag: a diagnostics manager collecting the errors, a fresh one is
            created when not given.

    Returns:
        A tuple with the program tree and its symbol table.

    .. doctest::

        >>> import io
        >>> from simplepas.api import parse_pascal
        >>> program, symbol_table = parse_pascal(
        ...     io.StringIO("program p; begin x := 1 end."))
        >>> program.text
        'p'
        >>> 'x' in symbol_table
        True
    """
    if diag is None:
        diag = DiagnosticsManager()
    builder = PascalBuilder(diag)
    return builder.build(get_file(source))


def run_pascal(source, stdout=None, stdin=None, diag=None):
    """ Parse and execute a pascal program.

    Args:
        source: a filename or a file like object.
        stdout: file receiving the output, defaults to sys.stdout.
        stdin: file supplying read input, defaults to sys.stdin.
        diag: an optional diagnostics manager.

    Raises a CompilerError when the program has syntax errors, and an
    ExecutionError when the program fails at run time.
    """
    program, symbol_table = parse_pascal(source, diag=diag)
    executor = Executor(
        symbol_table, output=StreamOutput(stdout), reader=StreamInput(stdin))
    executor.execute(program)
