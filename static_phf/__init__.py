from .errors import (BuildError, DuplicateKey, DuplicateKeysig, HashOutOfRange,
                     InputTooLarge, NoUniqueSignature, RetryBudgetExhausted,
                     SnapshotError)
from .table import PerfectHashTable

__all__ = ["PerfectHashTable", "BuildError", "DuplicateKey", "DuplicateKeysig",
           "HashOutOfRange", "InputTooLarge", "NoUniqueSignature",
           "RetryBudgetExhausted", "SnapshotError"]
