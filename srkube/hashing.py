"""Stable object hashing with 32-bit FNV-1a over a canonical text dump."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

_FNV32_OFFSET_BASIS = 0x811C9DC5
_FNV32_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


class Fnv1a32:
    """Incremental 32-bit FNV-1a hash."""

    def __init__(self) -> None:
        self._value = _FNV32_OFFSET_BASIS

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        value = self._value
        for byte in data:
            value ^= byte
            value = (value * _FNV32_PRIME) & _MASK32
        self._value = value

    def intdigest(self) -> int:
        """Return the current hash as an unsigned integer."""
        return self._value


def dump_object(obj: Any) -> str:
    """Render an object as deterministic text, type names included.

    Mapping keys and set members are sorted, so the result does not depend
    on insertion order.
    """
    if obj is None:
        return "None"
    if isinstance(obj, Enum):
        return f"{type(obj).__name__}({dump_object(obj.value)})"
    if isinstance(obj, bool):
        return "True" if obj else "False"
    if isinstance(obj, (int, float)):
        return repr(obj)
    if isinstance(obj, str):
        return json.dumps(obj)
    if isinstance(obj, (bytes, bytearray)):
        return repr(bytes(obj))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = ", ".join(
            f"{field.name}: {dump_object(getattr(obj, field.name))}"
            for field in dataclasses.fields(obj)
        )
        return f"{type(obj).__name__}{{{fields}}}"
    if isinstance(obj, Mapping):
        items = sorted((dump_object(k), dump_object(v)) for k, v in obj.items())
        return "{" + ", ".join(f"{k}: {v}" for k, v in items) + "}"
    if isinstance(obj, (set, frozenset)):
        return "set[" + ", ".join(sorted(dump_object(item) for item in obj)) + "]"
    if isinstance(obj, tuple):
        return "(" + ", ".join(dump_object(item) for item in obj) + ")"
    if isinstance(obj, list):
        return "[" + ", ".join(dump_object(item) for item in obj) + "]"
    raise TypeError(f"cannot dump object of type {type(obj).__name__}")


def write_hash_object(hasher: Fnv1a32, obj: Any) -> None:
    """Feed the canonical dump of ``obj`` into ``hasher``."""
    hasher.update(dump_object(obj).encode("utf-8"))


def hash_object(obj: Any) -> str:
    """Return the FNV-1a hash of the object's canonical dump as decimal text."""
    hasher = Fnv1a32()
    write_hash_object(hasher, obj)
    return str(hasher.intdigest())