"""kandinsky: marshal arbitrary Python values into SVG documents.

Supported shapes: ints (and numpy integers), numpy.uint8 bytes, floats, bools,
str, dataclasses / NamedTuples / pydantic models, sequences, mappings, None
and weak references.

    svg = kandinsky.marshal(value, 96)
"""

from kandinsky.encoder import Dispatcher, marshal, marshal_png
from kandinsky.errors import (
    InvalidSizeError,
    InvalidValueError,
    KandinskyError,
    NestingTooDeepError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "Dispatcher",
    "marshal",
    "marshal_png",
    "KandinskyError",
    "InvalidSizeError",
    "InvalidValueError",
    "NestingTooDeepError",
    "UnsupportedTypeError",
]
