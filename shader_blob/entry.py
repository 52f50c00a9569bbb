# ==================================================
# shader_blob/entry.py
# ==================================================
"""Entry header layout and span arithmetic (no I/O)."""
from __future__ import annotations

import struct
from typing import NamedTuple

from .const import ENTRY_HDR_FMT, ENTRY_HDR_SIZE, MAX_FIELD_SIZE

_HDR = struct.Struct(ENTRY_HDR_FMT)


class EntryHeader(NamedTuple):
    key_size:  int
    data_size: int

    @property
    def entry_size(self) -> int:
        return ENTRY_HDR_SIZE + self.key_size + self.data_size


class EntrySpan(NamedTuple):
    """Absolute offsets of one entry inside a buffer."""
    start:       int
    key_off:     int
    payload_off: int
    next_off:    int

    @classmethod
    def at(cls, position: int, header: EntryHeader) -> "EntrySpan":
        key_off     = position + ENTRY_HDR_SIZE
        payload_off = key_off + header.key_size
        return cls(position, key_off, payload_off, payload_off + header.data_size)


def pack_header(key_size: int, data_size: int) -> bytes:
    for field, size in (("permutation key", key_size), ("data", data_size)):
        if not 0 <= size <= MAX_FIELD_SIZE:
            raise ValueError(f"{field} size {size} does not fit in u32")
    return _HDR.pack(key_size, data_size)


def read_header(buf, position: int) -> EntryHeader:
    """Unpack the header at ``position``; caller checks it fits first."""
    return EntryHeader(*_HDR.unpack_from(buf, position))


def entry_fits(position: int, header: EntryHeader, buf_len: int) -> bool:
    if position + ENTRY_HDR_SIZE > buf_len:
        return False
    return position + header.entry_size <= buf_len
