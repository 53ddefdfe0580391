"""
woofwoof/codec/bitstream.py — MSB-first bit regrouping shared by encoder and decoder.

The encoder regroups 8-bit frame bytes into 6-bit token values; the decoder
regroups 6-bit token values back into 8-bit bytes. Both directions are the
same operation with the widths swapped, so there is exactly one primitive.

Widths are capped at 8 bits, so every stage stays in ``uint8``: one byte
per unpacked bit, one byte per output group.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

_MAX_WIDTH = 8


def _check_width(name: str, width: int) -> None:
    if not 1 <= width <= _MAX_WIDTH:
        raise ValueError(f"{name} must be in [1, {_MAX_WIDTH}], got {width}")


def _as_uint8(values: bytes | bytearray | memoryview | Iterable[int], from_bits: int) -> np.ndarray:
    """Load *values* as a ``uint8`` array, rejecting anything wider than *from_bits*."""
    if isinstance(values, (bytes, bytearray, memoryview)):
        src = np.frombuffer(values, dtype=np.uint8)
        if from_bits < _MAX_WIDTH and src.size and src.max() >= (1 << from_bits):
            raise ValueError(f"input value does not fit in {from_bits} bits")
        return src

    wide = np.fromiter(values, dtype=np.int64)
    if wide.size and (wide.min() < 0 or wide.max() >= (1 << from_bits)):
        raise ValueError(f"input value does not fit in {from_bits} bits")
    return wide.astype(np.uint8)


def _fold(rows: np.ndarray, to_bits: int) -> np.ndarray:
    """Collapse each row of *to_bits* bits into one right-aligned ``uint8`` value."""
    return np.packbits(rows, axis=1)[:, 0] >> (_MAX_WIDTH - to_bits)


def regroup(
    values: bytes | bytearray | memoryview | Iterable[int],
    from_bits: int,
    to_bits: int,
    *,
    pad: bool = False,
) -> bytes:
    """
    Regroup a stream of *from_bits*-wide values into *to_bits*-wide values.

    Bits are read most-significant-first within each input value and in
    stream order across values, then cut into consecutive *to_bits* groups.

    A trailing partial group (fewer than *to_bits* bits) is either
    left-justified and zero-filled (``pad=True``, used on encode) or
    dropped (``pad=False``, used on decode).

    Example::

        list(regroup(b"\\x00\\x00\\x00\\x01\\x41", 8, 6, pad=True))
        # → [0, 0, 0, 0, 0, 20, 4]

    Args:
        values: Input values, each in ``[0, 2 ** from_bits)``. Byte-like
            input is read in place without copying.
        from_bits: Width of each input value (1–8).
        to_bits: Width of each output value (1–8).
        pad: Zero-fill the final partial group instead of dropping it.

    Returns:
        One byte per output group, each in ``[0, 2 ** to_bits)``.

    Raises:
        ValueError: If a width is out of range or an input value does not
            fit in *from_bits*.
    """
    _check_width("from_bits", from_bits)
    _check_width("to_bits", to_bits)

    src = _as_uint8(values, from_bits)
    if from_bits == _MAX_WIDTH:
        bits = np.unpackbits(src)
    else:
        bits = np.empty(src.size * from_bits, dtype=np.uint8)
        for k in range(from_bits):
            bits[k::from_bits] = (src >> (from_bits - 1 - k)) & 1

    whole = bits.size // to_bits
    groups = _fold(bits[: whole * to_bits].reshape(whole, to_bits), to_bits)

    tail = bits[whole * to_bits:]
    if pad and tail.size:
        last = np.zeros((1, to_bits), dtype=np.uint8)
        last[0, : tail.size] = tail
        groups = np.concatenate([groups, _fold(last, to_bits)])

    return groups.tobytes()
