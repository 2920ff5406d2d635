"""Base64 codec with multiple alphabet variants.

This package converts arbitrary bytes to and from Base64 text using one of
several published alphabets, with or without ``=`` padding. Decoding is
strict: any input a conformant encoder could not have produced is rejected.

Main Components:
    - encode / decode: one-shot conversion between bytes and symbols
    - encode_into / decode_into: conversion into caller-supplied buffers
    - Base64Codec: a codec bound to a variant, padding flag and strategy
    - Variant: the supported alphabets
    - Exceptions: DecodeError for malformed input, BufferSizeError for
      undersized destination buffers

Example:
    >>> from varbase64 import Variant, decode, encode
    >>> encode(b"\\x00")
    b'AA=='
    >>> decode(b"-_8", padding=False, variant=Variant.URL_SAFE)
    b'\\xfb\\xff'
"""

import logging

from varbase64.codec import (
    Base64Codec,
    CodecConfig,
    Strategy,
    decode,
    decode_into,
    encode,
    encode_into,
    encoded_length,
    is_valid,
    max_decoded_length,
    required_length,
)
from varbase64.exceptions import Base64Error, BufferSizeError, DecodeError
from varbase64.variants import INVALID, PAD, Variant, forward_table, reverse_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "decode",
    "encode_into",
    "decode_into",
    "encoded_length",
    "max_decoded_length",
    "required_length",
    "is_valid",
    "Base64Codec",
    "CodecConfig",
    "Strategy",
    # Variants
    "Variant",
    "forward_table",
    "reverse_table",
    "INVALID",
    "PAD",
    # Exceptions
    "Base64Error",
    "DecodeError",
    "BufferSizeError",
]
