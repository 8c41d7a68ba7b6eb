""" Pascal front-end """

from .builder import PascalBuilder
from .parser import Parser
from .lexer import Lexer
from .nodes import Node, NodeKind
from .source import Source
from .symbol_table import SymbolTable


__all__ = [
    "PascalBuilder",
    "Parser",
    "Lexer",
    "Node",
    "NodeKind",
    "Source",
    "SymbolTable",
]
