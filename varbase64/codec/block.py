"""Block-unrolled Base64 encoder and decoder.

These functions process three bytes / four symbols per step and finish with
a switch on the remaining tail. They accept and reject exactly the same
inputs as the accumulator implementations in :mod:`varbase64.codec.encoder`
and :mod:`varbase64.codec.decoder` and produce identical output.
"""

from __future__ import annotations

import logging

from varbase64.codec.decoder import Symbols, WritableBuffer, as_symbols, required_length
from varbase64.codec.encoder import byte_view, encoded_length
from varbase64.exceptions import BufferSizeError, DecodeError
from varbase64.variants import INVALID, PAD, Variant, forward_table, reverse_table

logger = logging.getLogger(__name__)


def block_encode_into(
    source: bytes | bytearray | memoryview,
    dest: WritableBuffer,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> int:
    """Encode ``source`` into ``dest`` three bytes at a time.

    See :func:`varbase64.codec.encoder.encode_into` for the contract.
    """
    src = byte_view(source)
    length = len(src)
    required = encoded_length(length, padding)
    if len(dest) < required:
        raise BufferSizeError(required, len(dest))

    table = forward_table(variant)
    i = 0
    cp = 0

    while length - i >= 3:
        ac = src[i] << 16 | src[i + 1] << 8 | src[i + 2]
        dest[cp] = table[ac >> 18]
        dest[cp + 1] = table[(ac >> 12) & 0x3F]
        dest[cp + 2] = table[(ac >> 6) & 0x3F]
        dest[cp + 3] = table[ac & 0x3F]
        i += 3
        cp += 4

    tail = length - i
    if tail == 2:
        ac = src[i] << 16 | src[i + 1] << 8
        dest[cp] = table[ac >> 18]
        dest[cp + 1] = table[(ac >> 12) & 0x3F]
        dest[cp + 2] = table[(ac >> 6) & 0x3F]
        cp += 3
        if padding:
            dest[cp] = PAD
            cp += 1
    elif tail == 1:
        ac = src[i] << 16
        dest[cp] = table[ac >> 18]
        dest[cp + 1] = table[(ac >> 12) & 0x3F]
        cp += 2
        if padding:
            dest[cp] = PAD
            dest[cp + 1] = PAD
            cp += 2

    return cp


def block_decode_into(
    symbols: Symbols,
    dest: WritableBuffer,
    padding: bool = True,
    variant: Variant = Variant.STANDARD,
) -> int:
    """Decode ``symbols`` into ``dest`` four symbols at a time.

    See :func:`varbase64.codec.decoder.decode_into` for the contract.
    """
    s = as_symbols(symbols)
    required = required_length(len(s), padding)
    if len(dest) < required:
        raise BufferSizeError(required, len(dest))

    rev = reverse_table(variant)
    length = len(s)
    i = 0
    bp = 0

    while length - i >= 4:
        a, b, c, d = rev[s[i]], rev[s[i + 1]], rev[s[i + 2]], rev[s[i + 3]]
        if INVALID in (a, b, c, d):
            # only a padded final group may contain '=', and it must end in one
            if not padding or length - i != 4 or s[i + 3] != PAD:
                logger.debug("rejecting base64 input: invalid group at offset %d", i)
                raise DecodeError()
            padding = False
            length = i + (2 if s[i + 2] == PAD else 3)
            break
        val = a << 18 | b << 12 | c << 6 | d
        dest[bp] = val >> 16
        dest[bp + 1] = (val >> 8) & 0xFF
        dest[bp + 2] = val & 0xFF
        i += 4
        bp += 3

    tail = length - i
    if not tail:
        return bp
    if padding or tail == 1:
        logger.debug("rejecting base64 input: bad tail of %d symbols", tail)
        raise DecodeError()

    a, b = rev[s[i]], rev[s[i + 1]]
    c = rev[s[i + 2]] if tail == 3 else 0
    if INVALID in (a, b, c):
        logger.debug("rejecting base64 input: invalid symbol in final group")
        raise DecodeError()

    val = a << 12 | b << 6 | c
    if tail == 2:
        if val & 0x3FF:
            logger.debug("rejecting base64 input: non-zero trailing bits")
            raise DecodeError()
        dest[bp] = val >> 10
        return bp + 1

    if val & 0x3:
        logger.debug("rejecting base64 input: non-zero trailing bits")
        raise DecodeError()
    dest[bp] = val >> 10
    dest[bp + 1] = (val >> 2) & 0xFF
    return bp + 2
