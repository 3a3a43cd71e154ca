"""Strategy registry and the type-keyed dispatch cache.

Every encoding strategy is a standalone function registered via decorator:

    @strategy(ShapeKind.FLOAT)
    def encode_float(walker: Walker, value: Any, region: Region) -> None:
        region.canvas.circle(...)

``classify`` maps a runtime class onto the closed set of ``ShapeKind`` tags;
``Dispatcher`` memoizes class -> strategy so homogeneous data (a list of
identically shaped records) only pays for classification once.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import logging
import threading
import weakref
from typing import TYPE_CHECKING, Any, Callable

import numpy as np
from pydantic import BaseModel

from kandinsky.errors import UnsupportedTypeError

if TYPE_CHECKING:
    from kandinsky.encoder.layout import Region
    from kandinsky.encoder.walker import Walker

logger = logging.getLogger(__name__)

Strategy = Callable[["Walker", Any, "Region"], None]


class ShapeKind(enum.Enum):
    SIGNED_INT = "signed_int"
    BYTE = "byte"
    FLOAT = "float"
    BOOL = "bool"
    TEXT = "text"
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    INDIRECTION = "indirection"


_SEQUENCE_TYPES = (collections.abc.Sequence, np.ndarray)
_INDIRECTION_TYPES = (type(None), weakref.ref)


def is_record_type(descriptor: type) -> bool:
    """Dataclasses, NamedTuples and pydantic models carry declared fields."""
    if dataclasses.is_dataclass(descriptor):
        return True
    if issubclass(descriptor, tuple) and hasattr(descriptor, "_fields"):
        return True
    return issubclass(descriptor, BaseModel)


def classify(descriptor: type) -> ShapeKind:
    """Map a runtime class onto its shape category.

    Order matters: ``bool`` is an ``int``, ``str`` is a ``Sequence`` and a
    NamedTuple is a ``tuple``, so the narrower checks run first.
    """
    if issubclass(descriptor, (bool, np.bool_)):
        return ShapeKind.BOOL
    if issubclass(descriptor, np.uint8):
        return ShapeKind.BYTE
    if issubclass(descriptor, (int, np.integer)):
        return ShapeKind.SIGNED_INT
    if issubclass(descriptor, (float, np.floating)):
        return ShapeKind.FLOAT
    if issubclass(descriptor, str):
        return ShapeKind.TEXT
    if issubclass(descriptor, _INDIRECTION_TYPES):
        return ShapeKind.INDIRECTION
    if is_record_type(descriptor):
        return ShapeKind.RECORD
    if issubclass(descriptor, collections.abc.Mapping):
        return ShapeKind.MAPPING
    if issubclass(descriptor, _SEQUENCE_TYPES):
        return ShapeKind.SEQUENCE
    raise UnsupportedTypeError(descriptor)


_strategies: dict[ShapeKind, Strategy] = {}


def strategy(kind: ShapeKind):
    """Decorator to register the built-in strategy for a shape category."""

    def decorator(fn: Strategy) -> Strategy:
        if kind in _strategies:
            raise ValueError(f"Duplicate strategy for {kind.name}")
        _strategies[kind] = fn
        logger.debug("Registered strategy %s for %s", fn.__name__, kind.name)
        return fn

    return decorator


def builtin_strategies() -> dict[ShapeKind, Strategy]:
    """Import the built-in encoder modules so their @strategy decorators fire."""
    import importlib

    for module_name in ("leaves", "composites"):
        importlib.import_module(f"kandinsky.encoder.{module_name}")
    return dict(_strategies)


class Dispatcher:
    """Resolves type descriptors to strategies, caching every success.

    Lookups read the cache dict without locking; only inserts take the lock.
    Two threads missing on the same descriptor may both classify it, which is
    harmless because the result depends on the descriptor alone. Failures are
    never cached.
    """

    def __init__(self, strategies: dict[ShapeKind, Strategy] | None = None) -> None:
        self._strategies = dict(strategies) if strategies is not None else builtin_strategies()
        self._cache: dict[type, Strategy] = {}
        self._lock = threading.Lock()

    def resolve(self, descriptor: type) -> Strategy:
        fn = self._cache.get(descriptor)
        if fn is not None:
            return fn

        kind = classify(descriptor)
        fn = self._strategies.get(kind)
        if fn is None:
            raise UnsupportedTypeError(descriptor)

        with self._lock:
            self._cache[descriptor] = fn
        logger.debug("Bound %s to %s", descriptor.__qualname__, kind.name)
        return fn

    def cached(self) -> dict[type, Strategy]:
        """Snapshot of the cache contents."""
        with self._lock:
            return dict(self._cache)

    def __contains__(self, descriptor: type) -> bool:
        return descriptor in self._cache

    @property
    def count(self) -> int:
        return len(self._cache)


_default: Dispatcher | None = None
_default_lock = threading.Lock()


def get_dispatcher() -> Dispatcher:
    """Process-wide dispatcher shared by every ``marshal`` call that does not inject one."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Dispatcher()
    return _default
