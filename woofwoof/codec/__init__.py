"""
woofwoof.codec — Bit-packing codec between UTF-8 text and dog-speech tokens.
"""

from woofwoof.codec.codebook import DEFAULT_CODEBOOK, Codebook, build_codebook
from woofwoof.codec.decoder import decode
from woofwoof.codec.encoder import encode
from woofwoof.codec.errors import (
    CodebookError,
    CorruptPayloadError,
    DecodeError,
    EmptyInputError,
    EncodeError,
    InvalidInputError,
    TruncatedHeaderError,
    TruncatedPayloadError,
    UnknownTokenError,
    WoofCodecError,
)

__all__ = [
    "DEFAULT_CODEBOOK",
    "Codebook",
    "CodebookError",
    "CorruptPayloadError",
    "DecodeError",
    "EmptyInputError",
    "EncodeError",
    "InvalidInputError",
    "TruncatedHeaderError",
    "TruncatedPayloadError",
    "UnknownTokenError",
    "WoofCodecError",
    "build_codebook",
    "decode",
    "encode",
]
