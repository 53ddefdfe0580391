"""
woofwoof/codec/decoder.py — Dog-speech token stream → text.

All-or-nothing: the first unknown token, short buffer or invalid UTF-8
payload aborts the call with a :class:`~woofwoof.codec.errors.DecodeError`.
"""

from __future__ import annotations

import unicodedata

from woofwoof.codec.bitstream import regroup
from woofwoof.codec.codebook import DEFAULT_CODEBOOK, Codebook
from woofwoof.codec.errors import (
    CorruptPayloadError,
    EmptyInputError,
    UnknownTokenError,
)
from woofwoof.codec.framing import parse_frame
from woofwoof.core.constants import C


def decode(token_stream: str, codebook: Codebook = DEFAULT_CODEBOOK) -> str:
    """
    Decode a whitespace-separated dog-speech token stream back to text.

    Tokens may be separated by any run of whitespace. Leftover bits after
    the last whole byte, and bytes after the declared payload, are padding
    and are ignored.

    Args:
        token_stream: Output of :func:`~woofwoof.codec.encoder.encode`, possibly
            re-wrapped or copy/pasted.
        codebook: Token table the stream was encoded with.

    Returns:
        The original text.

    Raises:
        EmptyInputError: Nothing but whitespace was given.
        UnknownTokenError: A token is not in *codebook*.
        TruncatedHeaderError: Fewer than 4 bytes were recovered.
        TruncatedPayloadError: The header claims more bytes than are present.
        CorruptPayloadError: The payload is not valid UTF-8.
    """
    normalized = unicodedata.normalize(C.NORMALIZATION_FORM, token_stream).strip()
    if not normalized:
        raise EmptyInputError()

    values = bytearray()
    for position, token in enumerate(normalized.split()):
        value = codebook.value_for(token)
        if value is None:
            raise UnknownTokenError(token, position)
        values.append(value)

    payload = parse_frame(regroup(values, C.GROUP_BITS, C.BYTE_BITS))

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CorruptPayloadError(str(exc)) from exc
