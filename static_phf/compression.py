# ==================================================
# static_phf/compression.py
# ==================================================
import zstandard as zstd

# -------- LEB128 varint helpers ------------------------------------------

def varint_encode(n: int, out: bytearray) -> bytearray:
    if n < 0:
        raise ValueError("varint must be non‑negative")
    while True:
        byte = n & 0x7F
        n >>= 7
        if n:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return out


def varint_decode(data: bytes, offset: int) -> tuple[int, int]:
    """Return ``(value, next_offset)``; IndexError if ``data`` ends early."""
    n = shift = 0
    while True:
        byte = data[offset]
        offset += 1
        n |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return n, offset
        shift += 7

# -------- zstd wrappers ---------------------------------------------------

cctx = zstd.ZstdCompressor(level=3)
dctx = zstd.ZstdDecompressor()

def compress(data: bytes) -> bytes:
    return cctx.compress(data)

def decompress(data: bytes) -> bytes:
    return dctx.decompress(data)
