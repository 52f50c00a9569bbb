# ==================================================
# shader_blob/lookup.py
# ==================================================
from __future__ import annotations

import enum
import logging
from typing import NamedTuple, Optional

from .const import KEY_ENCODING, SIGNATURE_SIZE
from .keys import ConstantsLike, as_constants, canonical_key
from .scanner import BlobScanner, ScanStop, byte_view, has_signature

LOGGER = logging.getLogger(__name__)


class BlobError(enum.Enum):
    MALFORMED_BLOB                        = "malformed blob"
    PERMUTATION_REQUESTED_ON_UNKEYED_BLOB = "permutation requested on unkeyed blob"
    PERMUTATION_NOT_FOUND                 = "permutation not found"
    SINK_WRITE_FAILURE                    = "sink write failure"


class LookupResult(NamedTuple):
    binary: Optional[bytes]
    error:  Optional[BlobError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def find_permutation(blob, constants: ConstantsLike = None) -> LookupResult:
    """Return the binary stored under the canonical key of ``constants``.

    A blob without the signature is a single unkeyed binary and only answers
    a request with no constants.
    """
    blob = byte_view(blob)
    if blob is None or len(blob) < SIGNATURE_SIZE:
        return LookupResult(None, BlobError.MALFORMED_BLOB)

    consts = as_constants(constants)
    if not has_signature(blob):
        if consts:
            return LookupResult(None, BlobError.PERMUTATION_REQUESTED_ON_UNKEYED_BLOB)
        return LookupResult(bytes(blob))

    try:
        wanted = canonical_key(consts).encode(KEY_ENCODING)
    except UnicodeEncodeError:
        # nothing the writer produced can hold an unencodable key
        return LookupResult(None, BlobError.PERMUTATION_NOT_FOUND)
    scanner = BlobScanner(blob)
    for entry in scanner:
        # length first: a stored key that is a prefix of ``wanted`` must not match
        if len(entry.key) == len(wanted) and entry.key == wanted:
            return LookupResult(scanner.payload(entry))

    if scanner.stop is ScanStop.TRUNCATED:
        return LookupResult(None, BlobError.MALFORMED_BLOB)
    LOGGER.debug("permutation %r not in blob (scan stopped: %s)", wanted, scanner.stop.value)
    return LookupResult(None, BlobError.PERMUTATION_NOT_FOUND)
