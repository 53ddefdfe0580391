"""
woofwoof/codec/errors.py — Error taxonomy for the woofwoof codec.

Every failure is terminal for the call that raised it. Each exception
carries a ``details`` dict so the CLI can render a precise message and
log structured context without parsing message strings.
"""

from __future__ import annotations

from typing import Any


class WoofCodecError(ValueError):
    """Base class for all encode/decode failures."""

    def __init__(self, message: str, **details: Any) -> None:
        self._details = details
        super().__init__(message)

    @property
    def details(self) -> dict[str, Any]:
        """Structured context for logs (error kind plus any counts/tokens)."""
        return {"error": type(self).__name__, **self._details}


class CodebookError(RuntimeError):
    """
    Raised when the codebook cannot be built.

    This is a programming-time invariant violation, not a user error:
    the default codebook is built at import time, so the process cannot
    start with a broken codebook.
    """


# ──────────────────────────────────────────────────────────────
# Encode side
# ──────────────────────────────────────────────────────────────

class EncodeError(WoofCodecError):
    """Base class for encode failures."""


class InvalidInputError(EncodeError):
    """Input is not well-formed Unicode text (or too long to frame)."""

    def __init__(self, message: str = "input is not valid UTF-8", **details: Any) -> None:
        super().__init__(message, **details)


# ──────────────────────────────────────────────────────────────
# Decode side
# ──────────────────────────────────────────────────────────────

class DecodeError(WoofCodecError):
    """Base class for decode failures."""


class EmptyInputError(DecodeError):
    """Token stream is empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("empty input")


class UnknownTokenError(DecodeError):
    """
    A token is not in the codebook.

    Args:
        token: The offending token text.
        position: Zero-based index of the token in the stream.
    """

    def __init__(self, token: str, position: int | None = None) -> None:
        self.token = token
        self.position = position
        super().__init__(f"unknown token: {token!r}", token=token, position=position)


class TruncatedHeaderError(DecodeError):
    """
    Decoded buffer is too short to hold the length header.

    Args:
        have: Number of bytes recovered from the token stream.
    """

    def __init__(self, have: int) -> None:
        self.have = have
        super().__init__("decoded data too short (missing length header)", have=have)


class TruncatedPayloadError(DecodeError):
    """
    Header declares more payload bytes than the token stream carries.

    Args:
        expected: Payload length declared by the header.
        have: Payload bytes actually available after the header.
    """

    def __init__(self, expected: int, have: int) -> None:
        self.expected = expected
        self.have = have
        super().__init__(
            f"decoded data incomplete: need {expected} bytes payload, have {have}",
            expected=expected,
            have=have,
        )


class CorruptPayloadError(DecodeError):
    """
    Payload bytes are not valid UTF-8.

    Args:
        reason: The underlying :class:`UnicodeDecodeError` text.
    """

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(
            "decoded payload is not valid UTF-8 (token stream may be corrupted)",
            reason=reason,
        )
