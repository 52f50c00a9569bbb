# ==================================================
# shader_blob/scanner.py
# ==================================================
"""Single forward pass over the entries of a signed blob."""
from __future__ import annotations

import enum
import logging
from typing import Iterator, NamedTuple, Optional

from .const import ENTRY_HDR_SIZE, SIGNATURE, SIGNATURE_SIZE
from .entry import EntrySpan, entry_fits, read_header

LOGGER = logging.getLogger(__name__)


class ScanStop(enum.Enum):
    EXHAUSTED = "exhausted"     # not enough bytes left for another header
    SENTINEL  = "sentinel"      # header with data_size == 0
    TRUNCATED = "truncated"     # declared entry runs past the buffer


class BlobEntry(NamedTuple):
    key:  bytes
    span: EntrySpan

    @property
    def offset(self) -> int:
        return self.span.start

    @property
    def data_size(self) -> int:
        return self.span.next_off - self.span.payload_off


def byte_view(buf) -> Optional[memoryview]:
    """Flat unsigned-byte view of any buffer; ``None`` stays ``None``."""
    if buf is None:
        return None
    return memoryview(buf).cast("B")


def has_signature(buf) -> bool:
    buf = byte_view(buf)
    if buf is None or len(buf) < SIGNATURE_SIZE:
        return False
    return bytes(buf[:SIGNATURE_SIZE]) == SIGNATURE


class BlobScanner:
    """Walks the entries of ``buf`` starting at ``start`` (just past the
    signature by default).

    Iterating yields :class:`BlobEntry` records; once iteration ends
    :attr:`stop` says why. The buffer is never modified, so a scanner can be
    iterated again, and any number of scanners can share one buffer.
    """

    def __init__(self, buf, start: int = SIGNATURE_SIZE):
        self._buf  = byte_view(buf)
        self.start = start
        self.stop: Optional[ScanStop] = None

    def __iter__(self) -> Iterator[BlobEntry]:
        buf       = self._buf
        cursor    = self.start
        remaining = len(buf) - cursor
        self.stop = None

        while remaining > ENTRY_HDR_SIZE:
            header = read_header(buf, cursor)
            if header.data_size == 0:
                self.stop = ScanStop.SENTINEL
                return
            if not entry_fits(cursor, header, len(buf)):
                LOGGER.warning("truncated entry at offset %d: declares %d bytes, %d remain",
                               cursor, header.entry_size, remaining)
                self.stop = ScanStop.TRUNCATED
                return

            span = EntrySpan.at(cursor, header)
            yield BlobEntry(bytes(buf[span.key_off:span.payload_off]), span)

            cursor    += header.entry_size
            remaining -= header.entry_size

        self.stop = ScanStop.EXHAUSTED

    def payload(self, entry: BlobEntry) -> bytes:
        return bytes(self._buf[entry.span.payload_off:entry.span.next_off])
