# ==================================================
# static_phf/errors.py
# ==================================================


class BuildError(ValueError):
    """Base class for every table construction failure."""


class InputTooLarge(BuildError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"{count} keys given, at most {limit} supported")
        self.count = count
        self.limit = limit


class DuplicateKey(BuildError):
    def __init__(self, key: bytes):
        super().__init__(f"duplicate key {key!r}")
        self.key = key


class NoUniqueSignature(BuildError):
    def __init__(self):
        super().__init__("no unique signature found")


class HashOutOfRange(BuildError, RuntimeError):
    """A computed hash does not fit the table.

    Only a wrong sizing constant gets here; treat it as a bug, not as bad input.
    """

    def __init__(self, key: bytes, hash_value: int, limit: int):
        super().__init__(f"hash {hash_value} of {key!r} out of range (limit {limit})")
        self.key = key
        self.hash_value = hash_value
        self.limit = limit


class DuplicateKeysig(BuildError):
    def __init__(self, a: bytes, b: bytes, signature):
        super().__init__(f"duplicate keysig: {a!r} and {b!r} "
                         f"are indistinguishable under {tuple(signature)}")
        self.keys = (a, b)
        self.signature = tuple(signature)


class RetryBudgetExhausted(BuildError):
    def __init__(self, attempts: int):
        super().__init__(f"failed to find perfect hash after {attempts} attempts")
        self.attempts = attempts


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be turned back into a table."""
