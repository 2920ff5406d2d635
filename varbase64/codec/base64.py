"""Configured Base64 codec.

This module provides :class:`Base64Codec`, which binds an alphabet variant,
a padding flag and an implementation strategy so callers can encode and
decode without repeating those parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from varbase64.codec.block import block_decode_into, block_encode_into
from varbase64.codec.decoder import Symbols, as_symbols, decode_into, max_decoded_length
from varbase64.codec.encoder import byte_view, encode_into, encoded_length
from varbase64.exceptions import DecodeError
from varbase64.interfaces.encoding import IBinaryEncoder
from varbase64.variants import Variant


class Strategy(Enum):
    """Implementation strategy used by a codec.

    Both strategies have identical external behaviour.
    """

    ACCUMULATOR = "accumulator"
    BLOCK = "block"


_ENCODERS: Dict[Strategy, Callable[..., int]] = {
    Strategy.ACCUMULATOR: encode_into,
    Strategy.BLOCK: block_encode_into,
}

_DECODERS: Dict[Strategy, Callable[..., int]] = {
    Strategy.ACCUMULATOR: decode_into,
    Strategy.BLOCK: block_decode_into,
}


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Base64 codec.

    Attributes:
        variant: The alphabet to use.
        padding: Whether encoded text is ``=`` padded to a multiple of 4.
        strategy: The implementation strategy.
    """

    variant: Variant = Variant.STANDARD
    padding: bool = True
    strategy: Strategy = Strategy.ACCUMULATOR


class Base64Codec(IBinaryEncoder):
    """Base64 codec bound to a :class:`CodecConfig`.

    Encoding returns ASCII text. Decoding accepts text or bytes and raises
    :class:`~varbase64.exceptions.DecodeError` for malformed input.

    Example:
        >>> codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))
        >>> codec.encode(b"\\xfb\\xff")
        '-_8'
        >>> codec.decode("-_8")
        b'\\xfb\\xff'
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: The codec configuration. Defaults to padded ``STANDARD``.
        """
        self.config = config or CodecConfig()

    def encode_bytes(self, data: bytes | bytearray | memoryview) -> bytes:
        """Encode bytes and return the symbols as bytes."""
        source = byte_view(data)
        dest = bytearray(encoded_length(len(source), self.config.padding))
        written = _ENCODERS[self.config.strategy](
            source, dest, self.config.padding, self.config.variant
        )
        return bytes(dest[:written])

    def encode(self, data: bytes) -> str:
        """Encode bytes to Base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        return self.encode_bytes(data).decode("ascii")

    def decode(self, text: Symbols) -> bytes:
        """Decode Base64 text to bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: If the text is not valid for this configuration.
        """
        src = as_symbols(text)
        dest = bytearray(max_decoded_length(len(src)))
        written = _DECODERS[self.config.strategy](
            src, dest, self.config.padding, self.config.variant
        )
        return bytes(dest[:written])

    def is_valid(self, text: Symbols) -> bool:
        """Check whether ``text`` decodes under this configuration."""
        try:
            self.decode(text)
        except DecodeError:
            return False
        return True
