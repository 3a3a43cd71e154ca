"""Value walker, the single recursion point of the encoder."""

from __future__ import annotations

from typing import Any

from kandinsky.encoder.layout import Region
from kandinsky.encoder.registry import Dispatcher, get_dispatcher
from kandinsky.errors import InvalidSizeError, InvalidValueError, NestingTooDeepError

# A grid level costs up to six interpreter frames (mapping pairs, indirection),
# 100 levels stays well inside CPython's default recursion limit of 1000.
MAX_DEPTH = 100


class Walker:
    """Resolves a strategy for each value and hands it the region to draw in.

    Strategies that render sub-values call back into ``encode`` instead of
    invoking each other, so dispatch and caching apply at every depth. Errors
    propagate unchanged; whatever was drawn before the failure stays on the
    canvas.
    """

    def __init__(self, dispatcher: Dispatcher | None = None, max_depth: int = MAX_DEPTH) -> None:
        self.dispatcher = dispatcher or get_dispatcher()
        self.max_depth = max_depth

    def encode(self, value: Any, region: Region) -> None:
        if not region.side > 0:
            raise InvalidSizeError(region.side)
        if region.depth > self.max_depth:
            raise NestingTooDeepError(self.max_depth)
        # Below the root a None is an unset optional and goes to the indirection strategy
        if value is None and region.depth == 0:
            raise InvalidValueError(value)

        fn = self.dispatcher.resolve(type(value))
        fn(self, value, region)
