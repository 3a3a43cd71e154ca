"""API request models."""

from __future__ import annotations

import enum


class ScalarType(str, enum.Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    BYTE = "byte"
    STR = "str"


class OutputFormat(str, enum.Enum):
    SVG = "svg"
    PNG = "png"
