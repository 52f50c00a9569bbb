# ==================================================
# shader_blob/diagnostics.py
# ==================================================
from __future__ import annotations

from .keys import ConstantsLike, canonical_key, display_key
from .permutations import enumerate_permutations


def format_not_found_message(blob, constants: ConstantsLike = None) -> str:
    """Explain a failed lookup: the requested key and what the blob holds.

    Comparing the listed keys against the blob's expected contents is how a
    caller tells a damaged blob from a permutation that was never built.
    """
    lines = [
        "Couldn't find the required shader permutation in the blob, or the blob is corrupted.",
        "Required permutation key: ",
        display_key(canonical_key(constants)),
    ]
    available = enumerate_permutations(blob)
    if available:
        lines.append("Permutations available in the blob:")
        lines.extend(available)
        return "\n".join(lines) + "\n"
    lines.append("No permutations found in the blob.")
    return "\n".join(lines)
