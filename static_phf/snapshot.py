# ==================================================
# static_phf/snapshot.py
# ==================================================
"""Binary snapshot of a built table.

    header   HEADER_FMT, uncompressed
    body     zstd( signature | weights | slots[0..max_hash] | keys )

Each key is a varint length followed by its bytes. Values are not stored.
"""
import struct
from dataclasses import dataclass

import numpy as np
import zstandard as zstd

from .compression import compress, decompress, varint_decode, varint_encode
from .const import (HEADER_FMT, HEADER_SIZE, MAGIC, MAX_KEYS, SENTINEL, SIG_FMT,
                    TABLE_LEN, VERSION_MINOR, WEIGHTS_DTYPE)
from .errors import SnapshotError

WEIGHTS_SIZE = 256 * 2


@dataclass
class Snapshot:
    keys:      tuple
    signature: tuple
    weights:   np.ndarray
    slots:     np.ndarray
    max_hash:  int


def pack(snap: Snapshot) -> bytes:
    sig_len = len(snap.signature)
    header = struct.pack(HEADER_FMT, MAGIC, VERSION_MINOR, sig_len, 0,
                         len(snap.keys), snap.max_hash)
    body = bytearray(struct.pack(SIG_FMT.format(sig_len), *snap.signature))
    body += np.asarray(snap.weights).astype(WEIGHTS_DTYPE).tobytes()
    body += np.asarray(snap.slots[:snap.max_hash + 1], dtype=np.uint8).tobytes()
    for key in snap.keys:
        varint_encode(len(key), body)
        body += key
    return header.ljust(HEADER_SIZE, b"\0") + compress(bytes(body))


def unpack(data: bytes) -> Snapshot:
    if len(data) < HEADER_SIZE:
        raise SnapshotError("Truncated snapshot header")
    magic, ver, sig_len, _, key_count, max_hash = struct.unpack_from(HEADER_FMT, data, 0)
    if magic != MAGIC:
        raise SnapshotError("Invalid snapshot file")
    if ver > VERSION_MINOR:
        raise SnapshotError(f"Unsupported snapshot version 1.{ver}")
    if key_count > MAX_KEYS or max_hash >= TABLE_LEN:
        raise SnapshotError("Snapshot exceeds table limits")
    try:
        body = decompress(data[HEADER_SIZE:])
    except zstd.ZstdError as e:
        raise SnapshotError(f"Corrupt snapshot body: {e}") from e

    try:
        off = 0
        signature = struct.unpack_from(SIG_FMT.format(sig_len), body, off)
        off += sig_len
        weights = np.frombuffer(body, dtype=WEIGHTS_DTYPE, count=256, offset=off)
        off += WEIGHTS_SIZE
        used = np.frombuffer(body, dtype=np.uint8, count=max_hash + 1, offset=off)
        off += max_hash + 1
        keys = []
        for _ in range(key_count):
            n, off = varint_decode(body, off)
            if off + n > len(body):
                raise SnapshotError("Truncated key data")
            keys.append(bytes(body[off:off + n]))
            off += n
    except SnapshotError:
        raise
    except (struct.error, ValueError, IndexError) as e:
        raise SnapshotError(f"Truncated snapshot body: {e}") from e
    if off != len(body):
        raise SnapshotError("Trailing bytes after key data")

    slots = np.full(TABLE_LEN, SENTINEL, dtype=np.uint8)
    slots[:max_hash + 1] = used
    return Snapshot(tuple(keys), tuple(signature),
                    weights.astype(np.uint16), slots, max_hash)
