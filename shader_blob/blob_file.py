# ==================================================
# shader_blob/blob_file.py
# ==================================================
import mmap, os
import logging
from pathlib import Path
from typing import Optional

from .diagnostics  import format_not_found_message
from .keys         import ConstantsLike
from .lookup       import LookupResult, find_permutation
from .permutations import EntryInfo, describe_entries, enumerate_permutations

LOGGER = logging.getLogger(__name__)


class PermutationNotFoundError(LookupError):
    def __init__(self, message: str, result: LookupResult):
        super().__init__(message)
        self.result = result


class ShaderBlobFile:
    """Read-only, mmap-backed view of a blob file."""
    def __init__(self, path: "str | os.PathLike"):
        self.path = Path(path)
        self.file = open(self.path, "rb")
        # mmap refuses zero-length files
        try:
            if os.fstat(self.file.fileno()).st_size:
                self.buf = mmap.mmap(self.file.fileno(), 0, access=mmap.ACCESS_READ)
            else:
                self.buf = b""
        except (OSError, ValueError):
            self.file.close()
            raise
        LOGGER.debug("opened %s (%d bytes)", self.path, len(self.buf))

    # ------------------------------------------------------------------
    def find(self, constants: ConstantsLike = None) -> LookupResult:
        return find_permutation(self.buf, constants)

    def get(self, constants: ConstantsLike = None) -> Optional[bytes]:
        return self.find(constants).binary

    def require(self, constants: ConstantsLike = None) -> bytes:
        res = self.find(constants)
        if not res:
            raise PermutationNotFoundError(format_not_found_message(self.buf, constants), res)
        return res.binary

    def permutations(self) -> list:
        return enumerate_permutations(self.buf)

    def entries(self) -> "list[EntryInfo]":
        return describe_entries(self.buf)

    # ------------------------------------------------------------------
    def close(self):
        if isinstance(self.buf, mmap.mmap):
            self.buf.close()
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
