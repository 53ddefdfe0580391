"""
woofwoof/core/constants.py — All wire-format constants for woofwoof.

Single frozen dataclass with typed constant groups: frame layout, bit
widths, the 8 × 8 core/tone codebook ingredients, and the CLI ``Mode`` enum.
These values are fixed for interoperability; nothing here is configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


# ──────────────────────────────────────────────────────────────
# Modes
# ──────────────────────────────────────────────────────────────

class Mode(Enum):
    """Direction of a transcoding request."""

    ENCODE = "encode"
    DECODE = "decode"

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        """
        Resolve a mode name or alias (case-insensitive) to a :class:`Mode`.

        Accepts ``encode``/``enc`` and ``decode``/``dec``.

        Raises:
            ValueError: If *value* names no known mode.
        """
        if isinstance(value, Mode):
            return value
        key = str(value).strip().lower()
        mode = _MODE_ALIASES.get(key)
        if mode is None:
            raise ValueError(f"unknown mode: {value}")
        return mode


_MODE_ALIASES: dict[str, Mode] = {
    "encode": Mode.ENCODE,
    "enc": Mode.ENCODE,
    "decode": Mode.DECODE,
    "dec": Mode.DECODE,
}


# ──────────────────────────────────────────────────────────────
# Frozen constants dataclass
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class WoofConstants:
    """
    Frozen dataclass holding all woofwoof wire-format constants.

    Use the class attributes directly; do not instantiate this class.

    Example::

        from woofwoof.core.constants import C

        print(C.GROUP_BITS)      # 6
        print(C.CODEBOOK_SIZE)   # 64
    """

    # ── Frame layout ──────────────────────────────────────────
    HEADER_BYTES: ClassVar[int] = 4
    """Width of the big-endian payload length header."""

    HEADER_FORMAT: ClassVar[str] = ">I"
    """:mod:`struct` format of the length header (big-endian uint32)."""

    MAX_PAYLOAD_BYTES: ClassVar[int] = 0xFFFF_FFFF
    """Largest payload length the header can describe."""

    # ── Bit widths ────────────────────────────────────────────
    BYTE_BITS: ClassVar[int] = 8
    """Bits per frame byte."""

    GROUP_BITS: ClassVar[int] = 6
    """Bits carried by one token."""

    CODEBOOK_SIZE: ClassVar[int] = 64
    """Number of tokens in the codebook (``2 ** GROUP_BITS``)."""

    # ── Text handling ─────────────────────────────────────────
    NORMALIZATION_FORM: ClassVar[str] = "NFC"
    """Unicode normalisation applied to both encoder and decoder input."""

    TOKEN_SEPARATOR: ClassVar[str] = " "
    """Separator written between tokens on encode."""

    # ── Codebook ingredients (order is the wire format) ───────
    CORES: ClassVar[tuple[str, ...]] = (
        "汪",
        "嗚",
        "嗷",
        "汪汪",
        "嗚汪",
        "嗷汪",
        "汪嗚",
        "~汪",
    )
    """Core fragments; ``core_index`` is the high 3 bits of a group."""

    TONES: ClassVar[tuple[str, ...]] = (
        "",
        ".",
        "~",
        "～",   # fullwidth tilde
        "…",    # ellipsis
        "!",
        "！",   # fullwidth exclamation
        "~.",
    )
    """Tone suffixes; ``tone_index`` is the low 3 bits of a group."""


#: Convenience alias: ``from woofwoof.core.constants import C``
C = WoofConstants
