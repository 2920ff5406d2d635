"""Base64 codec package.

This package provides the encoder, the decoder, the block-unrolled
alternatives and the configured :class:`Base64Codec` facade.
"""

from .base64 import Base64Codec, CodecConfig, Strategy
from .block import block_decode_into, block_encode_into
from .decoder import decode, decode_into, is_valid, max_decoded_length, required_length
from .encoder import encode, encode_into, encoded_length

__all__ = [
    # facade
    "Base64Codec",
    "CodecConfig",
    "Strategy",
    # encoder
    "encode",
    "encode_into",
    "encoded_length",
    # decoder
    "decode",
    "decode_into",
    "is_valid",
    "max_decoded_length",
    "required_length",
    # block strategy
    "block_decode_into",
    "block_encode_into",
]
