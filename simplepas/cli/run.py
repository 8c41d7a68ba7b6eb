""" Pascal interpreter.

Parse a pascal program and run it, reading input from standard input
or from the given input file.
"""


import argparse
from .base import base_parser, LogSetup, OnceAction
from .. import api
from ..common import DiagnosticsManager, CompilerError
from ..interpreter import Executor, StreamInput


parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument("source", help="pascal source file")
parser.add_argument(
    "--input", metavar="input-file", action=OnceAction,
    help="read program input from this file instead of standard input",
    type=argparse.FileType("r"))
parser.add_argument(
    "--check", action="store_true", default=False,
    help="only parse the program, do not run it")


def run(args=None):
    """ Pascal interpreter """
    args = parser.parse_args(args)
    with LogSetup(args):
        diag = DiagnosticsManager()
        try:
            program, symbol_table = api.parse_pascal(args.source, diag=diag)
        finally:
            diag.print_errors()

        if args.check:
            if diag.error_count:
                raise CompilerError(
                    'Found {} errors'.format(diag.error_count))
            return

        executor = Executor(symbol_table, reader=StreamInput(args.input))
        executor.execute(program)


if __name__ == "__main__":
    run()
