# ==================================================
# static_phf/weights.py
# ==================================================
"""Weight search.

``hash(key) = len(key) + sum(weights[c] for c in selected bytes)``. Keys are
placed in input order; on a collision the whole table is thrown away, the
rarest byte separating the two colliding keys gets heavier, and placement
starts over. Bounded by a retry budget, so it may give up.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .const import INCREMENTS, MAX_HASH, MAX_TRIES, SENTINEL, TABLE_LEN
from .errors import DuplicateKeysig, HashOutOfRange, RetryBudgetExhausted
from .multiset import rarest_distinguishing_byte
from .signature import key_signature, selected_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightSolution:
    weights:  np.ndarray     # (256,) uint16, read‑only
    slots:    np.ndarray     # (TABLE_LEN,) uint8, read‑only
    max_hash: int
    attempts: int


def byte_frequency(keys: Sequence[bytes], signature: Sequence[int]) -> np.ndarray:
    """How many (key, position) selections land on each byte value."""
    picked = [c for key in keys for c in selected_bytes(key, signature)]
    return np.bincount(np.asarray(picked, dtype=np.intp), minlength=256)


def hash_key(key: bytes, signature: Sequence[int], weights) -> int:
    h = len(key)
    for c in selected_bytes(key, signature):
        h += int(weights[c])
    return h


def find_weights(keys: Sequence[bytes], signature: Sequence[int],
                 max_tries: Optional[int] = None,
                 table_len: int = TABLE_LEN) -> WeightSolution:
    max_tries = MAX_TRIES if max_tries is None else max_tries
    signature = tuple(signature)
    freq = byte_frequency(keys, signature)
    keysigs = [key_signature(k, signature) for k in keys]

    weights = np.zeros(256, dtype=np.uint16)
    slots = np.full(table_len, SENTINEL, dtype=np.uint8)

    attempt = 0
    solved = False
    while not solved and attempt <= max_tries:
        attempt += 1
        slots.fill(SENTINEL)
        solved = True
        for i, key in enumerate(keys):
            h = hash_key(key, signature, weights)
            if h >= table_len:
                raise HashOutOfRange(key, h, table_len)
            if slots[h] == SENTINEL:
                slots[h] = i
                continue

            # collision with the key already sitting in slot h
            j = int(slots[h])
            c = rarest_distinguishing_byte(keysigs[i], keysigs[j], freq)
            if c is None:
                raise DuplicateKeysig(keys[j], key, signature)
            step = INCREMENTS[attempt % len(INCREMENTS)]
            weights[c] += step
            logger.debug("attempt %d: %r collides with %r at %d, weight[%d] += %d",
                         attempt, key, keys[j], h, c, step)
            solved = False
            break

    if not solved:
        raise RetryBudgetExhausted(attempt)

    max_hash = max((hash_key(k, signature, weights) for k in keys), default=0)
    if max_hash > MAX_HASH:
        raise HashOutOfRange(b"", max_hash, MAX_HASH)

    # bytes no key ever selects: weight is never read, pinned for stable output
    weights[freq == 0] = max_hash

    weights.flags.writeable = False
    slots.flags.writeable = False
    logger.info("perfect hash found after %d attempt(s), max_hash=%d", attempt, max_hash)
    return WeightSolution(weights, slots, max_hash, attempt)
