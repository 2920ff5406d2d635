"""Base64 decoder.

The decoder mirrors the encoder: each symbol contributes six bits to an
accumulator and a byte is emitted whenever eight bits are available. Input is
rejected as a whole when it contains a symbol outside the variant's alphabet,
when ``=`` padding is malformed, when a single symbol dangles after the last
complete group, or when the bits left over in the final group are not zero.

Every rejection raises the same :class:`~varbase64.exceptions.DecodeError`.
The specific reason is only logged at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import Union

from varbase64.codec.encoder import byte_view
from varbase64.exceptions import BufferSizeError, DecodeError
from varbase64.variants import INVALID, PAD, Variant, reverse_table

logger = logging.getLogger(__name__)

Symbols = Union[str, bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def max_decoded_length(length: int) -> int:
    """Upper bound on the number of bytes decoded from ``length`` symbols.

    The bound holds for padded and unpadded input alike. For padded input,
    whose length is a multiple of 4, it equals ``length // 4 * 3``.

    Args:
        length: The number of input symbols.

    Returns:
        ``floor(length * 6 / 8)``.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    return length * 3 // 4


def as_symbols(symbols: Symbols) -> memoryview:
    """Return a byte view over ``symbols``, encoding text as ASCII.

    Raises:
        DecodeError: If a text input contains non-ASCII characters.
    """
    if isinstance(symbols, str):
        try:
            symbols = symbols.encode("ascii")
        except UnicodeEncodeError:
            logger.debug("rejecting base64 input: non-ASCII text")
            raise DecodeError() from None
    return byte_view(symbols)


def _reject(reason: str, *args: object) -> DecodeError:
    logger.debug("rejecting base64 input: " + reason, *args)
    return DecodeError()


def required_length(length: int, padding: bool) -> int:
    """Destination size needed to decode ``length`` symbols.

    Padded input comes in whole groups of four, so its bound is
    ``length // 4 * 3``. Unpadded input uses :func:`max_decoded_length`.

    Raises:
        DecodeError: If padding is enabled and ``length`` is not a multiple of 4.
    """
    if padding:
        if length % 4:
            raise _reject("padded input of %d symbols", length)
        return length // 4 * 3
    return max_decoded_length(length)


def decode_into(
    symbols: Symbols,
    dest: WritableBuffer,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> int:
    """Decode ``symbols`` into the caller-supplied buffer ``dest``.

    Args:
        symbols: The Base64 text to decode.
        dest: A writable buffer of at least
            ``required_length(len(symbols), padding)`` bytes. Bytes are written
            from index 0.
        padding: Whether the input must be ``=`` padded to a multiple of 4.
            When false, ``=`` is an invalid symbol.
        variant: The alphabet the input was encoded with.

    Returns:
        The number of bytes written. Only this many bytes of ``dest`` are
        meaningful.

    Raises:
        DecodeError: If the input is malformed. ``dest`` may have been
            partially written.
        BufferSizeError: If ``dest`` is smaller than ``required_length``.
    """
    src = as_symbols(symbols)
    required = required_length(len(src), padding)
    if len(dest) < required:
        raise BufferSizeError(required, len(dest))

    table = reverse_table(variant)
    written = 0
    acc = 0
    bits = 0
    count = 0
    pads = 0

    for position, symbol in enumerate(src):
        if padding and symbol == PAD:
            pads += 1
            continue
        if pads:
            raise _reject("symbol after padding at offset %d", position)
        value = table[symbol]
        if value == INVALID:
            raise _reject("invalid symbol %r at offset %d", bytes((symbol,)), position)
        acc = (acc << 6) | value
        bits += 6
        count += 1
        if bits >= 8:
            bits -= 8
            dest[written] = (acc >> bits) & 0xFF
            written += 1
            acc &= (1 << bits) - 1

    if pads > 2:
        raise _reject("malformed padding (%d pad)", pads)
    if count % 4 == 1:
        raise _reject("truncated final group")
    if acc:
        raise _reject("non-zero trailing bits in final group")

    return written


def decode(
    symbols: Symbols,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> bytes:
    """Decode Base64 to bytes.

    Args:
        symbols: The Base64 text to decode.
        padding: Whether the input is ``=`` padded.
        variant: The alphabet the input was encoded with.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If the input is not valid for this variant and padding.

    Example:
        >>> decode(b"AA==")
        b'\\x00'
        >>> decode("AA", padding=False)
        b'\\x00'
    """
    src = as_symbols(symbols)
    dest = bytearray(max_decoded_length(len(src)))
    written = decode_into(src, dest, padding, variant)
    return bytes(dest[:written])


def is_valid(
    symbols: Symbols,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> bool:
    """Check whether ``symbols`` decodes under the given variant and padding."""
    try:
        decode(symbols, padding, variant)
    except DecodeError:
        return False
    return True
