""" Tree walking interpreter and its runtime support """

from .values import Value, ValueKind, format_value
from .console import StreamInput, StreamOutput, BufferedOutput
from .executor import Executor


__all__ = [
    "Value",
    "ValueKind",
    "format_value",
    "StreamInput",
    "StreamOutput",
    "BufferedOutput",
    "Executor",
]
