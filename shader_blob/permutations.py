# ==================================================
# shader_blob/permutations.py
# ==================================================
"""Listing the permutations stored in a blob (diagnostics only)."""
from __future__ import annotations

from typing import NamedTuple

import xxhash

from .const import KEY_ENCODING
from .keys import display_key
from .scanner import BlobScanner, byte_view, has_signature


def enumerate_permutations(blob) -> list[str]:
    """Keys in on-disk order; the empty key is reported as ``<default>``.

    Unsigned or empty blobs give ``[]``. A truncated entry ends the list, so
    the keys seen before the damage are still returned.
    """
    blob = byte_view(blob)
    if not has_signature(blob):
        return []
    return [display_key(e.key.decode(KEY_ENCODING, "replace")) for e in BlobScanner(blob)]


class EntryInfo(NamedTuple):
    offset:    int
    key:       str
    data_size: int
    digest:    str      # xxh64 of the payload, hex


def describe_entries(blob) -> list[EntryInfo]:
    blob = byte_view(blob)
    if not has_signature(blob):
        return []
    scanner = BlobScanner(blob)
    return [
        EntryInfo(e.offset,
                  display_key(e.key.decode(KEY_ENCODING, "replace")),
                  e.data_size,
                  xxhash.xxh64(scanner.payload(e)).hexdigest())
        for e in scanner
    ]
