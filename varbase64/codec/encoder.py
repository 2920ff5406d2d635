"""Base64 encoder.

The encoder feeds input bytes into a bit accumulator, most-significant bit
first, and emits one symbol for every complete 6-bit group. A final partial
group is zero-filled on the right. Encoding cannot fail.
"""

from __future__ import annotations

from typing import Union

from varbase64.exceptions import BufferSizeError
from varbase64.variants import PAD, Variant, forward_table

WritableBuffer = Union[bytearray, memoryview]


def byte_view(data: bytes | bytearray | memoryview) -> memoryview:
    """Return a flat unsigned-byte view over any bytes-like object.

    Non-contiguous views are copied into a contiguous buffer first.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast("B")


def encoded_length(length: int, padding: bool) -> int:
    """Compute the exact number of symbols produced for ``length`` input bytes.

    Args:
        length: The number of input bytes.
        padding: Whether ``=`` padding is emitted.

    Returns:
        ``ceil(length / 3) * 4`` with padding, ``ceil(length * 8 / 6)`` without.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if padding:
        return (length + 2) // 3 * 4
    return (length * 8 + 5) // 6


def encode_into(
    source: bytes | bytearray | memoryview,
    dest: WritableBuffer,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> int:
    """Encode ``source`` into the caller-supplied buffer ``dest``.

    Args:
        source: The bytes to encode.
        dest: A writable buffer of at least ``encoded_length(len(source), padding)``
            bytes. Symbols are written from index 0.
        padding: Whether to append ``=`` until the output is a multiple of 4.
        variant: The alphabet to encode with.

    Returns:
        The number of symbols written.

    Raises:
        BufferSizeError: If ``dest`` is smaller than the encoded length.
    """
    data = byte_view(source)
    required = encoded_length(len(data), padding)
    if len(dest) < required:
        raise BufferSizeError(required, len(dest))

    alphabet = forward_table(variant)
    written = 0
    acc = 0
    bits = 0

    for byte in data:
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 6:
            bits -= 6
            dest[written] = alphabet[(acc >> bits) & 0x3F]
            written += 1
        # keep only the bits not yet emitted
        acc &= (1 << bits) - 1

    if bits:
        dest[written] = alphabet[(acc << (6 - bits)) & 0x3F]
        written += 1

    if padding:
        while written % 4:
            dest[written] = PAD
            written += 1

    return written


def encode(
    source: bytes | bytearray | memoryview,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> bytes:
    """Encode bytes to Base64.

    Args:
        source: The bytes to encode.
        padding: Whether to append ``=`` padding.
        variant: The alphabet to encode with.

    Returns:
        The encoded symbols.

    Example:
        >>> encode(b"\\x00")
        b'AA=='
        >>> encode(b"\\xfb\\xff", padding=False, variant=Variant.URL_SAFE)
        b'-_8'
    """
    data = byte_view(source)
    dest = bytearray(encoded_length(len(data), padding))
    written = encode_into(data, dest, padding, variant)
    return bytes(dest[:written])
