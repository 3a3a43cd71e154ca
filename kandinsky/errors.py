"""Error taxonomy for the structural encoder.

Every failure raised while marshaling derives from ``KandinskyError`` so callers
(the HTTP layer in particular) can catch the whole family at once.
"""

from __future__ import annotations


class KandinskyError(Exception):
    """Base class for all marshaling failures."""


class InvalidSizeError(KandinskyError):
    """The requested document size is not positive."""

    def __init__(self, size: float) -> None:
        super().__init__(f"kandinsky: invalid marshal size {size!r}")
        self.size = size


class InvalidValueError(KandinskyError):
    """The value handed to the walker carries no readable data."""

    def __init__(self, value: object) -> None:
        super().__init__(f"kandinsky: invalid value {value!r}")
        self.value = value


class UnsupportedTypeError(KandinskyError):
    """No encoding strategy exists for the value's runtime shape."""

    def __init__(self, descriptor: type) -> None:
        name = getattr(descriptor, "__qualname__", repr(descriptor))
        module = getattr(descriptor, "__module__", "")
        if module and module != "builtins":
            name = f"{module}.{name}"
        super().__init__(f"kandinsky: unsupported type {name}")
        self.descriptor = descriptor


class NestingTooDeepError(KandinskyError):
    """The value nests more levels than the encoder will descend."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"kandinsky: value nested deeper than {max_depth} levels")
        self.max_depth = max_depth
