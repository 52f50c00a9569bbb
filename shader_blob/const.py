# ==================================================
# shader_blob/const.py
# ==================================================
SIGNATURE      = b"NVSP"        # 4‑byte marker; absent = legacy unkeyed blob
SIGNATURE_SIZE = len(SIGNATURE)
ENTRY_HDR_FMT  = "<LL"          # permutation_key_size, data_size
ENTRY_HDR_SIZE = 4 + 4          # 8 bytes, no padding
MAX_FIELD_SIZE = 0xFFFFFFFF     # both header fields are u32
DEFAULT_KEY    = "<default>"    # display form of the empty key
KEY_ENCODING   = "utf-8"
