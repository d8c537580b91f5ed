# ==================================================
# static_phf/multiset.py
# ==================================================
from typing import Iterator, Optional, Sequence

from .const import MAX_SIGNATURE_LEN


class ByteMultiSet:
    """Multiset of byte values, one ``[byte, count]`` entry per distinct byte.

    Capacity is bounded by the longest signature, so a key contributes at most
    ``MAX_SIGNATURE_LEN`` entries.
    """

    __slots__ = ("_entries", "capacity")

    def __init__(self, data: bytes = b"", capacity: int = MAX_SIGNATURE_LEN):
        self._entries: list[list[int]] = []
        self.capacity = capacity
        for c in data:
            self.insert(c)

    # ------------------------------------------------------------------
    def _entry(self, c: int) -> Optional[list[int]]:
        for entry in self._entries:
            if entry[0] == c:
                return entry
        return None

    def insert(self, c: int):
        entry = self._entry(c)
        if entry is not None:
            entry[1] += 1
            return
        if len(self._entries) >= self.capacity:
            raise OverflowError(f"multiset full ({self.capacity} entries)")
        self._entries.append([c, 1])

    def remove(self, c: int):
        for i, entry in enumerate(self._entries):
            if entry[0] != c:
                continue
            entry[1] -= 1
            if entry[1] == 0:
                # swap‑remove, entry order carries no meaning
                self._entries[i] = self._entries[-1]
                self._entries.pop()
            return
        raise KeyError(c)

    def count(self, c: int) -> int:
        entry = self._entry(c)
        return entry[1] if entry is not None else 0

    # ------------------------------------------------------------------
    def entries(self) -> Iterator[tuple[int, int]]:
        for c, n in self._entries:
            yield c, n

    def __len__(self):
        return sum(n for _, n in self._entries)

    def __contains__(self, c: int):
        return self._entry(c) is not None

    def __eq__(self, other):
        if not isinstance(other, ByteMultiSet):
            return NotImplemented
        if len(self._entries) != len(other._entries):
            return False
        return all(other.count(c) == n for c, n in self._entries)

    __hash__ = None

    def __repr__(self):
        inner = ", ".join(f"{c!r}: {n}" for c, n in self._entries)
        return f"ByteMultiSet({{{inner}}})"


def rarest_distinguishing_byte(a: ByteMultiSet, b: ByteMultiSet,
                               freq: Sequence[int]) -> Optional[int]:
    """Byte that tells ``a`` and ``b`` apart with the lowest global frequency.

    ``a`` is scanned before ``b``; a later candidate only wins on a strictly
    lower frequency. Returns None when the multisets are equal.
    """
    best = None
    best_freq = 0

    def consider(c: int):
        nonlocal best, best_freq
        if best is None or freq[c] < best_freq:
            best, best_freq = c, int(freq[c])

    # only in `a`, or in both with different counts
    for c, n in a.entries():
        if b.count(c) != n:
            consider(c)
    # only in `b`
    for c, _ in b.entries():
        if c not in a:
            consider(c)
    return best
