# ==================================================
# static_phf/signature.py
# ==================================================
"""Find a signature: a few byte positions that tell equal‑length keys apart.

A position ``i >= 0`` reads ``key[i]``, a position ``-i`` reads
``key[len(key) - i]``. Positions falling outside the key read nothing.
"""
import logging
from collections import defaultdict
from itertools import combinations
from typing import Iterable, Optional, Sequence

from .const import MAX_SIGNATURE_LEN, SIGNATURE_POOL
from .errors import NoUniqueSignature
from .multiset import ByteMultiSet

logger = logging.getLogger(__name__)


def index_byte(key: bytes, pos: int) -> Optional[int]:
    if abs(pos) >= len(key):
        return None
    return key[pos]          # negative positions count from the end


def selected_bytes(key: bytes, signature: Iterable[int]) -> Iterable[int]:
    for pos in signature:
        c = index_byte(key, pos)
        if c is not None:
            yield c


def key_signature(key: bytes, signature: Sequence[int]) -> ByteMultiSet:
    ms = ByteMultiSet(capacity=max(len(signature), 1))
    for c in selected_bytes(key, signature):
        ms.insert(c)
    return ms


def is_signature_unique(keys: Sequence[bytes], signature: Sequence[int]) -> bool:
    """True when no two keys of equal length share a signature multiset."""
    by_len = defaultdict(list)
    for key in keys:
        by_len[len(key)].append(key_signature(key, signature))
    for group in by_len.values():
        for i, ms in enumerate(group):
            for other in group[i + 1:]:
                if ms == other:
                    return False
    return True


def find_indistinguishable(keys: Sequence[bytes], signature: Sequence[int]):
    """First pair of equal‑length keys with identical multisets, or None."""
    sigs = [key_signature(k, signature) for k in keys]
    for i, key in enumerate(keys):
        for j in range(i + 1, len(keys)):
            if len(key) == len(keys[j]) and sigs[i] == sigs[j]:
                return key, keys[j]
    return None


def candidate_signatures(length: int, pool: Sequence[int] = SIGNATURE_POOL):
    # combinations() emits subsets in include‑before‑exclude order over the pool
    for combo in combinations(pool, length):
        yield combo


def find_unique_signature(keys: Sequence[bytes], min_len: int = 0,
                          pool: Sequence[int] = SIGNATURE_POOL) -> tuple[int, ...]:
    """Shortest signature (first in enumeration order) making keys unique."""
    if len(pool) > MAX_SIGNATURE_LEN:
        raise ValueError(f"signature pool larger than {MAX_SIGNATURE_LEN}")
    for length in range(min_len, len(pool) + 1):
        tried = 0
        for sig in candidate_signatures(length, pool):
            tried += 1
            if is_signature_unique(keys, sig):
                logger.info("signature %s found (length %d, %d candidates tried)",
                            sig, length, tried)
                return sig
        logger.debug("no unique signature of length %d (%d candidates)", length, tried)
    raise NoUniqueSignature()
