"""
Unit Tests: signature search
"""

import pytest

from static_phf.const import SIGNATURE_POOL
from static_phf.errors import NoUniqueSignature
from static_phf.multiset import ByteMultiSet
from static_phf.signature import (candidate_signatures, find_indistinguishable,
                                  find_unique_signature, index_byte,
                                  is_signature_unique, key_signature)


class TestIndexing:
    """Positive and negative positions."""

    def test_from_start(self):
        assert index_byte(b"abc", 0) == ord("a")
        assert index_byte(b"abc", 2) == ord("c")

    def test_from_end(self):
        assert index_byte(b"abc", -1) == ord("c")
        assert index_byte(b"abc", -2) == ord("b")

    def test_out_of_range(self):
        assert index_byte(b"abc", 3) is None
        assert index_byte(b"abc", -3) is None
        assert index_byte(b"", 0) is None

    def test_key_signature(self):
        assert key_signature(b"while", (0, -1)) == ByteMultiSet(b"we")
        assert key_signature(b"do", (0, 1, 2, 3, -1)) == ByteMultiSet(b"doo")


class TestUniqueness:
    """Only equal-length keys need distinct multisets."""

    def test_length_separates(self):
        assert is_signature_unique([b"a", b"aa", b"aaa"], ())

    def test_anagram_positions(self):
        keys = [b"ab", b"ba"]
        assert not is_signature_unique(keys, (0, 1))
        assert is_signature_unique(keys, (0,))
        assert find_indistinguishable(keys, (0, 1)) == (b"ab", b"ba")
        assert find_indistinguishable(keys, (-1,)) is None


class TestSearch:
    """find_unique_signature."""

    def test_enumeration_order(self):
        assert list(candidate_signatures(1)) == [(p,) for p in SIGNATURE_POOL]
        pairs = list(candidate_signatures(2))
        assert pairs[:3] == [(0, 1), (0, 2), (0, 3)]
        assert pairs[-1] == (-2, -3)
        assert len(pairs) == 21

    def test_empty_signature_when_lengths_differ(self):
        assert find_unique_signature([b"x", b"yy", b"zzz"]) == ()

    def test_min_len(self):
        assert find_unique_signature([b"x", b"yy"], min_len=1) == (0,)

    def test_first_working_candidate(self):
        # first bytes collide, second bytes differ
        assert find_unique_signature([b"ab", b"ac"]) == (1,)

    def test_keywords_shortest(self, keyword_keys):
        sig = find_unique_signature(keyword_keys)
        assert is_signature_unique(keyword_keys, sig)
        for shorter in range(len(sig)):
            assert not any(is_signature_unique(keyword_keys, c)
                           for c in candidate_signatures(shorter))

    def test_deterministic(self, keyword_keys):
        assert find_unique_signature(keyword_keys) == find_unique_signature(keyword_keys)

    def test_no_signature(self):
        # differ only at position 4, which no candidate reads
        with pytest.raises(NoUniqueSignature):
            find_unique_signature([b"aaaaXaaa", b"aaaaYaaa"])
