"""
tests/test_codebook.py — Unit tests for the 64-token codebook.

Pure logic tests: checks the wire-order enumeration, the reverse table,
immutability, and every construction failure mode.
"""

from __future__ import annotations

import dataclasses
import unicodedata
import unittest

from woofwoof.codec.codebook import DEFAULT_CODEBOOK, Codebook, build_codebook
from woofwoof.codec.errors import CodebookError
from woofwoof.core.constants import C

_LETTER_CORES = ("a", "b", "c", "d", "e", "f", "g", "h")
_DIGIT_TONES = ("0", "1", "2", "3", "4", "5", "6", "7")


class TestDefaultCodebook(unittest.TestCase):
    """Tests for the process-wide codebook."""

    def test_has_64_unique_tokens(self) -> None:
        """Exactly 64 distinct tokens."""
        self.assertEqual(len(DEFAULT_CODEBOOK), 64)
        self.assertEqual(len(set(DEFAULT_CODEBOOK.tokens)), 64)

    def test_reverse_is_exact_inverse(self) -> None:
        """tokens[v] → v for every value, and values cover [0, 63]."""
        for value, token in enumerate(DEFAULT_CODEBOOK.tokens):
            self.assertEqual(DEFAULT_CODEBOOK.value_for(token), value)
        self.assertEqual(sorted(DEFAULT_CODEBOOK.reverse.values()), list(range(64)))

    def test_core_major_enumeration(self) -> None:
        """value == core_index * 8 + tone_index for every core/tone pair."""
        for ci, core in enumerate(C.CORES):
            for ti, tone in enumerate(C.TONES):
                self.assertEqual(DEFAULT_CODEBOOK.value_for(core + tone), ci * 8 + ti)

    def test_known_entries(self) -> None:
        """Spot-check the interoperable wire assignments."""
        expected = {
            0: "汪",
            7: "汪~.",
            8: "嗚",
            20: "嗷…",
            31: "汪汪~.",
            60: "~汪…",
            63: "~汪~.",
        }
        for value, token in expected.items():
            self.assertEqual(DEFAULT_CODEBOOK.token_for(value), token)

    def test_tokens_survive_normalisation_and_splitting(self) -> None:
        """Every token is NFC-stable and contains no whitespace."""
        for token in DEFAULT_CODEBOOK.tokens:
            self.assertEqual(unicodedata.normalize("NFC", token), token)
            self.assertEqual(token.split(), [token])

    def test_unknown_token_lookup_returns_none(self) -> None:
        """value_for() misses return None; membership test agrees."""
        self.assertIsNone(DEFAULT_CODEBOOK.value_for("woof"))
        self.assertNotIn("woof", DEFAULT_CODEBOOK)
        self.assertIn("汪", DEFAULT_CODEBOOK)

    def test_rebuild_is_deterministic(self) -> None:
        """Building again yields the same token order."""
        self.assertEqual(build_codebook().tokens, DEFAULT_CODEBOOK.tokens)


class TestCodebookImmutability(unittest.TestCase):
    """The codebook is read-only after construction."""

    def test_reverse_table_rejects_writes(self) -> None:
        """Reverse table is a read-only mapping."""
        with self.assertRaises(TypeError):
            DEFAULT_CODEBOOK.reverse["woof"] = 1  # type: ignore[index]

    def test_fields_cannot_be_reassigned(self) -> None:
        """Codebook is a frozen dataclass."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_CODEBOOK.tokens = ()  # type: ignore[misc]


class TestBuildCodebookFailures(unittest.TestCase):
    """build_codebook() must refuse anything that would break round-tripping."""

    def test_custom_ingredients(self) -> None:
        """Any 8 × 8 collision-free product is accepted."""
        book = build_codebook(_LETTER_CORES, _DIGIT_TONES)
        self.assertIsInstance(book, Codebook)
        self.assertEqual(book.token_for(0), "a0")
        self.assertEqual(book.token_for(63), "h7")

    def test_duplicate_token_raises(self) -> None:
        """'a' + '.' collides with 'a.' + ''."""
        cores = ("a", "a.", "c", "d", "e", "f", "g", "h")
        tones = ("", ".", "2", "3", "4", "5", "6", "7")
        with self.assertRaisesRegex(CodebookError, "duplicate"):
            build_codebook(cores, tones)

    def test_wrong_size_raises(self) -> None:
        """7 × 8 = 56 tokens is not a 6-bit codebook."""
        with self.assertRaisesRegex(CodebookError, "size"):
            build_codebook(_LETTER_CORES[:7], _DIGIT_TONES)

    def test_whitespace_token_raises(self) -> None:
        """A token with a space could never be split back out."""
        tones = ("0", "1", "2", "3", "4", "5", "6", " 7")
        with self.assertRaisesRegex(CodebookError, "whitespace"):
            build_codebook(_LETTER_CORES, tones)

    def test_empty_token_raises(self) -> None:
        """Empty core + empty tone is rejected."""
        cores = ("",) + _LETTER_CORES[1:]
        tones = ("",) + _DIGIT_TONES[1:]
        with self.assertRaisesRegex(CodebookError, "empty"):
            build_codebook(cores, tones)

    def test_non_nfc_token_raises(self) -> None:
        """A decomposed token would change under decode-side normalisation."""
        cores = ("e\u0301",) + _LETTER_CORES[1:]
        with self.assertRaisesRegex(CodebookError, "NFC"):
            build_codebook(cores, _DIGIT_TONES)


if __name__ == "__main__":
    unittest.main()
