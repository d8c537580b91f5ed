# ==================================================
# static_phf/const.py
# ==================================================
import os

# ── sizing ────────────────────────────────────────────────────
MAX_KEYS       = 255                  # slot entries are one byte …
SENTINEL       = MAX_KEYS             # … and 255 marks an empty slot
TABLE_SPARSITY = 8
TABLE_LEN      = MAX_KEYS * TABLE_SPARSITY
MAX_HASH       = 0xFFFF               # max_hash must fit a u16

# ── signature search ──────────────────────────────────────────
MAX_SIGNATURE_LEN = 7
SIGNATURE_POOL    = (0, 1, 2, 3, -1, -2, -3)

# ── weight search ─────────────────────────────────────────────
INCREMENTS = (1, 3, 4)                # indexed by attempt % 3
MAX_TRIES  = int(os.getenv("STATIC_PHF_MAX_TRIES", "10000"))

LOG_LEVEL  = os.getenv("STATIC_PHF_LOG_LEVEL", "WARNING")

# ── snapshot file ─────────────────────────────────────────────
MAGIC         = b"PHF1"               # 4‑byte magic + version major «1»
HEADER_FMT    = "<4sHBBHH"            # magic, version_minor, sig_len, reserved, key_count, max_hash
HEADER_SIZE   = 12
SIG_FMT       = "<{}b"                # one signed byte per signature position
WEIGHTS_DTYPE = "<u2"                 # 256 little‑endian u16
VERSION_MINOR = 0
