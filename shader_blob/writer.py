# ==================================================
# shader_blob/writer.py
# ==================================================
"""Append-only blob encoding.

A blob is written as one signature followed by one entry per permutation.
No terminal entry is emitted: readers stop at the end of the buffer.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Iterable, Protocol, Tuple, Union

from .const import KEY_ENCODING, SIGNATURE
from .entry import pack_header
from .keys import ConstantsLike, canonical_key
from .lookup import BlobError

LOGGER = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, data: bytes) -> bool:
        """True only if every byte of ``data`` was accepted."""
        ...


# ── sinks ────────────────────────────────────────────────────
class BytesSink:
    """In-memory sink; :meth:`getvalue` returns everything written so far."""

    def __init__(self):
        self._buf = bytearray()

    def write(self, data: bytes) -> bool:
        self._buf += data
        return True

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class FileSink:
    """Appends to an already-open binary file object."""

    def __init__(self, f: BinaryIO):
        self.file = f

    def write(self, data: bytes) -> bool:
        try:
            n = self.file.write(data)
        except OSError as exc:
            LOGGER.error("write of %d bytes failed: %s", len(data), exc)
            return False
        return n == len(data)


class CallbackSink:
    """Adapts a plain ``fn(data) -> bool`` callable."""

    def __init__(self, fn: Callable[[bytes], bool]):
        self.fn = fn

    def write(self, data: bytes) -> bool:
        return bool(self.fn(data))


# ── protocol ─────────────────────────────────────────────────
def write_header(sink: Sink) -> bool:
    ok = bool(sink.write(SIGNATURE))
    if not ok:
        LOGGER.error("%s: signature", BlobError.SINK_WRITE_FAILURE.value)
    return ok


def write_permutation(sink: Sink, key: str, binary: bytes) -> bool:
    """Write one entry as three sink writes: header, key, binary.

    All three writes are issued even if an earlier one fails; the result is
    True only if every write succeeded.
    """
    key_bytes = key.encode(KEY_ENCODING)
    binary    = bytes(binary)
    if not binary:
        raise ValueError("binary must not be empty: a zero data size marks the end of a blob")
    header = pack_header(len(key_bytes), len(binary))

    ok  = bool(sink.write(header))
    ok &= bool(sink.write(key_bytes))
    ok &= bool(sink.write(binary))
    if not ok:
        LOGGER.error("%s: permutation %r (%d bytes)",
                     BlobError.SINK_WRITE_FAILURE.value, key, len(binary))
    return ok


class BlobWriter:
    """Enforces the write order: one header, then any number of entries.

    Not thread-safe; one writer per sink.
    """

    def __init__(self, sink: Sink):
        self.sink            = sink
        self.header_written  = False
        self.count           = 0

    def write_header(self) -> bool:
        if self.header_written:
            raise RuntimeError("blob header already written")
        self.header_written = True
        return write_header(self.sink)

    def write_permutation(self, key: str, binary: bytes) -> bool:
        if not self.header_written:
            raise RuntimeError("write_header() must be called before write_permutation()")
        ok = write_permutation(self.sink, key, binary)
        if ok:
            self.count += 1
        return ok

    def add(self, constants: ConstantsLike, binary: bytes) -> bool:
        """Canonicalise ``constants`` and write the entry."""
        return self.write_permutation(canonical_key(constants), binary)


PermutationLike = Tuple[ConstantsLike, Union[bytes, bytearray, memoryview]]


def build_blob(permutations: Iterable[PermutationLike]) -> bytes:
    """Encode ``(constants, binary)`` pairs into a complete blob."""
    sink   = BytesSink()
    writer = BlobWriter(sink)
    writer.write_header()
    for constants, binary in permutations:
        writer.add(constants, binary)
    return sink.getvalue()
