"""
woofwoof/codec/codebook.py — The fixed 64-token dog-speech codebook.

Tokens are the Cartesian product of 8 cores and 8 tones, core-major, so a
token's 6-bit value is ``core_index * 8 + tone_index``. The default
codebook is built once at import time and never mutated; a broken
codebook raises :class:`~woofwoof.codec.errors.CodebookError` before any
encode or decode call is possible.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from woofwoof.codec.errors import CodebookError
from woofwoof.core.constants import C

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────
# Codebook dataclass
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Codebook:
    """
    Immutable bijection between tokens and 6-bit values.

    Attributes:
        tokens: Token text indexed by value (``tokens[v]`` is the token for ``v``).
        reverse: Read-only token → value lookup, the exact inverse of ``tokens``.
    """

    tokens: tuple[str, ...]
    reverse: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.reverse

    def token_for(self, value: int) -> str:
        """Return the token for a 6-bit *value*."""
        return self.tokens[value]

    def value_for(self, token: str) -> int | None:
        """Return the 6-bit value for *token*, or ``None`` if it is not a codebook token."""
        return self.reverse.get(token)


# ──────────────────────────────────────────────────────────────
# Builder
# ──────────────────────────────────────────────────────────────

def _check_token(token: str) -> None:
    """Reject tokens that could not survive decode-side normalisation and splitting."""
    if not token:
        raise CodebookError("empty token in codebook")
    if any(ch.isspace() for ch in token):
        raise CodebookError(f"token contains whitespace: {token!r}")
    if unicodedata.normalize(C.NORMALIZATION_FORM, token) != token:
        raise CodebookError(f"token is not {C.NORMALIZATION_FORM}-stable: {token!r}")


def build_codebook(
    cores: Sequence[str] = C.CORES,
    tones: Sequence[str] = C.TONES,
) -> Codebook:
    """
    Build a :class:`Codebook` from core fragments and tone suffixes.

    Enumeration is core-major: the outer loop walks *cores*, the inner loop
    walks *tones*, and each ``core + tone`` token takes the next value
    starting at 0.

    Args:
        cores: Core fragments in wire order.
        tones: Tone suffixes in wire order.

    Returns:
        A frozen :class:`Codebook` with exactly ``C.CODEBOOK_SIZE`` entries.

    Raises:
        CodebookError: On a duplicate token, a token that is empty, contains
            whitespace or is not NFC-stable, or a product size other than 64.
    """
    tokens: list[str] = []
    reverse: dict[str, int] = {}

    for core in cores:
        for tone in tones:
            token = core + tone
            _check_token(token)
            if token in reverse:
                raise CodebookError(f"duplicate token in codebook: {token}")
            reverse[token] = len(tokens)
            tokens.append(token)

    if len(tokens) != C.CODEBOOK_SIZE:
        raise CodebookError(
            f"codebook size is {len(tokens)}, expected {C.CODEBOOK_SIZE}"
        )

    logger.debug("Codebook built: %d tokens (%d cores × %d tones)", len(tokens), len(cores), len(tones))
    return Codebook(tokens=tuple(tokens), reverse=MappingProxyType(reverse))


#: Process-wide codebook used by :func:`encode` / :func:`decode` by default.
DEFAULT_CODEBOOK: Codebook = build_codebook()
