"""Small language helpers exposed to embedded generator functions."""

from __future__ import annotations

from typing import Any, MutableMapping, Mapping


def merge(dst: MutableMapping, src: Mapping) -> MutableMapping:
    """Copy every key of ``src`` into ``dst`` and return ``dst``."""
    if not isinstance(dst, MutableMapping):
        raise TypeError("merge(): 'dst' has to be a mutable mapping")
    if not isinstance(src, Mapping):
        raise TypeError("merge(): 'src' has to be a mapping")
    dst.update(src)
    return dst


def clone_deep(value: Any) -> Any:
    """Deep copy nested lists, tuples and dicts; other values are shared."""
    if isinstance(value, Mapping):
        return {k: clone_deep(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_deep(v) for v in value]
    return value
