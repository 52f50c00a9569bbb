from .blob_file    import PermutationNotFoundError, ShaderBlobFile
from .const        import DEFAULT_KEY, SIGNATURE
from .diagnostics  import format_not_found_message
from .keys         import Constant, canonical_key, sorted_constant_indices
from .lookup       import BlobError, LookupResult, find_permutation
from .permutations import EntryInfo, describe_entries, enumerate_permutations
from .scanner      import BlobScanner, ScanStop
from .writer       import (BlobWriter, BytesSink, CallbackSink, FileSink,
                           build_blob, write_header, write_permutation)

__all__ = [
    "BlobError", "BlobScanner", "BlobWriter", "BytesSink", "CallbackSink",
    "Constant", "DEFAULT_KEY", "EntryInfo", "FileSink", "LookupResult",
    "PermutationNotFoundError", "SIGNATURE", "ScanStop", "ShaderBlobFile",
    "build_blob", "canonical_key", "describe_entries", "enumerate_permutations",
    "find_permutation", "format_not_found_message", "sorted_constant_indices",
    "write_header", "write_permutation",
]
