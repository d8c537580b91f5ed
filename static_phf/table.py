# ==================================================
# static_phf/table.py
# ==================================================
import logging
import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any, Optional

from .const import MAX_KEYS, MAX_SIGNATURE_LEN, SENTINEL
from .errors import DuplicateKey, DuplicateKeysig, InputTooLarge, SnapshotError
from .signature import find_indistinguishable, find_unique_signature, selected_bytes
from .snapshot import Snapshot, pack, unpack
from .weights import find_weights

logger = logging.getLogger(__name__)

KeyLike = bytes | bytearray | memoryview | str


def _as_key(key: KeyLike) -> bytes:
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"key must be bytes or str, not {type(key).__name__}")


def _check_signature(signature: Iterable[int]) -> tuple[int, ...]:
    sig = tuple(int(p) for p in signature)
    if len(sig) > MAX_SIGNATURE_LEN:
        raise ValueError(f"signature longer than {MAX_SIGNATURE_LEN}")
    if any(not -127 <= p <= 127 for p in sig):
        raise ValueError("signature positions must lie within -127..127")
    return sig


class PerfectHashTable:
    """Read‑only perfect hash map over a small, fixed set of byte keys.

    Built once from ``(key, value)`` pairs; lookups hash only the bytes at the
    signature positions plus the key length, then confirm with one byte
    comparison. Safe to share between threads.
    """

    __slots__ = ("_keys", "_values", "_signature", "_weights", "_slots", "_max_hash")

    def __init__(self, items: Mapping | Iterable,
                 signature: Optional[Sequence[int]] = None,
                 min_signature_len: int = 0,
                 max_tries: Optional[int] = None):
        pairs = list(items.items() if isinstance(items, Mapping) else items)
        if len(pairs) > MAX_KEYS:
            raise InputTooLarge(len(pairs), MAX_KEYS)
        keys = tuple(_as_key(k) for k, _ in pairs)
        values = tuple(v for _, v in pairs)

        seen = set()
        for key in keys:
            if key in seen:
                raise DuplicateKey(key)
            seen.add(key)

        if signature is None:
            sig = find_unique_signature(keys, min_signature_len)
        else:
            sig = _check_signature(signature)
            clash = find_indistinguishable(keys, sig)
            if clash is not None:
                raise DuplicateKeysig(clash[0], clash[1], sig)

        sol = find_weights(keys, sig, max_tries=max_tries)
        self._freeze(keys, values, sig, sol.weights, sol.slots, sol.max_hash)

    # ------------------------------------------------------------------
    def _freeze(self, keys, values, signature, weights, slots, max_hash):
        self._keys      = keys
        self._values    = values
        self._signature = signature
        self._weights   = weights
        self._slots     = slots
        self._max_hash  = max_hash

    @classmethod
    def _from_snapshot(cls, snap: Snapshot, values: Optional[Sequence[Any]]):
        if values is None:
            values = range(len(snap.keys))
        values = tuple(values)
        if len(values) != len(snap.keys):
            raise ValueError(f"{len(values)} values given for {len(snap.keys)} keys")

        occupied = snap.slots[snap.slots != SENTINEL]
        if len(occupied) != len(snap.keys) or (occupied >= len(snap.keys)).any():
            raise SnapshotError("Snapshot slot table does not match its keys")

        table = cls.__new__(cls)
        snap.weights.flags.writeable = False
        snap.slots.flags.writeable = False
        table._freeze(snap.keys, values, snap.signature,
                      snap.weights, snap.slots, snap.max_hash)
        for i, key in enumerate(snap.keys):
            h = table.hash(key)
            if h > snap.max_hash or snap.slots[h] != i:
                raise SnapshotError(f"Snapshot does not place key {key!r}")
        return table

    # ------------------------------------------------------------------
    @property
    def signature(self) -> tuple[int, ...]:
        return self._signature

    @property
    def weights(self):
        return self._weights

    @property
    def slots(self):
        return self._slots

    @property
    def max_hash(self) -> int:
        return self._max_hash

    def hash(self, key: KeyLike) -> int:
        key = _as_key(key)
        h = len(key)
        for c in selected_bytes(key, self._signature):
            h += int(self._weights[c])
        return h

    # ------------------------------------------------------------------
    def get(self, key: KeyLike, default=None):
        key = _as_key(key)
        h = self.hash(key)
        if h > self._max_hash:
            return default
        idx = int(self._slots[h])
        if idx == SENTINEL:
            return default
        if self._keys[idx] != key:
            return default
        return self._values[idx]

    def index(self, key: KeyLike) -> Optional[int]:
        """Position of ``key`` in construction order, or None."""
        key = _as_key(key)
        h = self.hash(key)
        if h > self._max_hash:
            return None
        idx = int(self._slots[h])
        if idx == SENTINEL or self._keys[idx] != key:
            return None
        return idx

    def __getitem__(self, key: KeyLike):
        idx = self.index(key)
        if idx is None:
            raise KeyError(key)
        return self._values[idx]

    def __contains__(self, key):
        try:
            return self.index(key) is not None
        except TypeError:
            return False

    def __len__(self):
        return len(self._keys)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._keys)

    def keys(self) -> tuple[bytes, ...]:
        return self._keys

    def values(self) -> tuple:
        return self._values

    def items(self):
        return zip(self._keys, self._values)

    def occupancy(self) -> float:
        """Fraction of slots ``0..max_hash`` holding a key."""
        return len(self._keys) / (self._max_hash + 1)

    def __repr__(self):
        return (f"PerfectHashTable({len(self._keys)} keys, "
                f"signature={self._signature}, max_hash={self._max_hash})")

    # ------------------------------------------------------------------
    def dumps(self) -> bytes:
        return pack(Snapshot(self._keys, self._signature, self._weights,
                             self._slots, self._max_hash))

    def save(self, path: str | os.PathLike):
        Path(path).write_bytes(self.dumps())
        logger.info("wrote %d keys to %s", len(self._keys), path)

    @classmethod
    def loads(cls, data: bytes, values: Optional[Sequence[Any]] = None):
        return cls._from_snapshot(unpack(data), values)

    @classmethod
    def load(cls, path: str | os.PathLike, values: Optional[Sequence[Any]] = None):
        return cls.loads(Path(path).read_bytes(), values)
