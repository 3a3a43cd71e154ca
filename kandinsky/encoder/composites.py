"""Composite encoders for records, sequences, mappings and indirection.

Records and sequences split their region with ``subdivide`` and recurse into
the walker once per child. Mappings are regrouped into ``EntryPair`` records
and drawn as a sequence. Indirection unwraps in place.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping, Sized
from typing import TYPE_CHECKING, Any

import numpy as np
from pydantic import BaseModel

from kandinsky.encoder.layout import subdivide
from kandinsky.encoder.registry import ShapeKind, strategy

if TYPE_CHECKING:
    from kandinsky.encoder.layout import Region
    from kandinsky.encoder.walker import Walker

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class EntryPair:
    """Two mapping entries drawn as one four-field record."""

    key1: Any
    value1: Any
    key2: Any = None
    value2: Any = None


def _encode_children(walker: Walker, children: Sized, region: Region) -> None:
    for child, sub in zip(children, subdivide(region, len(children))):
        walker.encode(child, sub)


def record_fields(value: Any) -> Iterator[tuple[str, Any]]:
    """Public fields of a dataclass, NamedTuple or pydantic model, in declaration order."""
    if isinstance(value, BaseModel):
        names = list(type(value).model_fields)
    elif dataclasses.is_dataclass(value):
        names = [f.name for f in dataclasses.fields(value)]
    else:
        names = list(value._fields)

    for name in names:
        # TODO: opt-in strict mode that rejects records with private fields instead of skipping them
        if name.startswith("_"):
            continue
        yield name, getattr(value, name)


@strategy(ShapeKind.RECORD)
def encode_record(walker: Walker, value: Any, region: Region) -> None:
    logger.debug("Encoding record %r", value)
    children = [v for _, v in record_fields(value)]
    _encode_children(walker, children, region)


def sequence_elements(value: Any) -> Sized:
    """Elements in index order; byte strings yield ``numpy.uint8`` scalars."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(value), dtype=np.uint8)
    if isinstance(value, np.ndarray):
        return np.atleast_1d(value)
    return value


@strategy(ShapeKind.SEQUENCE)
def encode_sequence(walker: Walker, value: Any, region: Region) -> None:
    _encode_children(walker, sequence_elements(value), region)


def pair_entries(mapping: Mapping) -> list[EntryPair]:
    """Fold entries two at a time; an odd tail leaves the second pair unset."""
    pairs: list[EntryPair] = []
    entries = iter(mapping.items())
    for key1, value1 in entries:
        second = next(entries, None)
        if second is None:
            pairs.append(EntryPair(key1, value1))
        else:
            key2, value2 = second
            pairs.append(EntryPair(key1, value1, key2, value2))
    return pairs


@strategy(ShapeKind.MAPPING)
def encode_mapping(walker: Walker, value: Any, region: Region) -> None:
    walker.encode(pair_entries(value), region)


def deref(value: Any) -> Any:
    """One level of indirection: ``None`` stays unset, a weak reference is called."""
    if value is None:
        return None
    return value()


@strategy(ShapeKind.INDIRECTION)
def encode_indirection(walker: Walker, value: Any, region: Region) -> None:
    target = deref(value)
    if target is None:
        return
    walker.encode(target, region)
