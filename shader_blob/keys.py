# ==================================================
# shader_blob/keys.py
# ==================================================
"""Canonical permutation keys.

A key is built from an unordered list of name/value constants: names are
stable-sorted and the pairs are joined as ``"name=value"`` with single
spaces. The same function tags entries on the write path and computes the
search key on the lookup path.
"""
from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple, Sequence, Union

from .const import DEFAULT_KEY


class Constant(NamedTuple):
    name: str
    value: str


ConstantsLike = Union[Mapping[str, str], Iterable[Union[Constant, Sequence[str]]], None]


def as_constants(constants: ConstantsLike) -> list[Constant]:
    """Normalise mappings / pairs / ``Constant`` tuples into a list."""
    if constants is None:
        return []
    if isinstance(constants, Mapping):
        items = constants.items()
    else:
        items = constants
    out: list[Constant] = []
    for item in items:
        if isinstance(item, (str, bytes)) or len(item) != 2:
            raise TypeError(f"constant must be a (name, value) pair, got {item!r}")
        name, value = item
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(f"constant name and value must be str, got {item!r}")
        out.append(Constant(name, value))
    return out


def sorted_constant_indices(names: Sequence[str]) -> list[int]:
    """Indices of ``names`` in sorted order; equal names keep input order.

    >>> sorted_constant_indices(["B", "A", "C"])
    [1, 0, 2]
    """
    # sorted() is stable; str ordering matches UTF‑8 byte ordering
    return sorted(range(len(names)), key=names.__getitem__)


def canonical_key(constants: ConstantsLike) -> str:
    consts = as_constants(constants)
    order  = sorted_constant_indices([c.name for c in consts])
    return " ".join(f"{consts[i].name}={consts[i].value}" for i in order)


def display_key(key: str) -> str:
    return key if key else DEFAULT_KEY
