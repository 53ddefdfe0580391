"""
woofwoof/codec/encoder.py — Text → dog-speech token stream.

Pipeline: NFC normalise → UTF-8 encode → length-prefix frame →
8-to-6-bit regroup (zero-padded tail) → codebook tokens joined by spaces.
"""

from __future__ import annotations

import unicodedata

from woofwoof.codec.bitstream import regroup
from woofwoof.codec.codebook import DEFAULT_CODEBOOK, Codebook
from woofwoof.codec.errors import InvalidInputError
from woofwoof.codec.framing import build_frame
from woofwoof.core.constants import C


def encode(text: str, codebook: Codebook = DEFAULT_CODEBOOK) -> str:
    """
    Encode *text* as a space-separated dog-speech token stream.

    Visually equivalent Unicode sequences produce identical output because
    the text is NFC-normalised first. The result has no trailing newline.

    Example::

        encode("A")
        # → '汪 汪 汪 汪 汪 嗷… 汪…'

    Args:
        text: Any well-formed Unicode string (may be empty).
        codebook: Token table to render 6-bit groups with.

    Returns:
        ``ceil((4 + len(utf8)) * 8 / 6)`` tokens joined by single spaces.

    Raises:
        InvalidInputError: If *text* is not a ``str`` or contains code
            points with no UTF-8 encoding (e.g. lone surrogates).
    """
    if not isinstance(text, str):
        raise InvalidInputError(
            f"input must be str, got {type(text).__name__}",
            type=type(text).__name__,
        )

    normalized = unicodedata.normalize(C.NORMALIZATION_FORM, text)
    try:
        payload = normalized.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError(position=exc.start) from exc

    groups = regroup(build_frame(payload), C.BYTE_BITS, C.GROUP_BITS, pad=True)
    return C.TOKEN_SEPARATOR.join(codebook.token_for(v) for v in groups)
