"""Filesystem-safe names for opaque binary data.

Binary names such as encrypted filenames are shown as unpadded URL-safe
Base64, which never contains "/" and so is always a single path component.
"""

from varbase64 import Base64Codec, CodecConfig, Variant, encoded_length

NAME_MAX = 255


class NoKeyName:
    """Encoder for binary names that must fit in one path component.

    Attributes:
        max_length: The longest encoded name accepted, in characters.
    """

    def __init__(self, max_length: int = NAME_MAX) -> None:
        self.codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))
        self.max_length = max_length

    @property
    def max_raw_length(self) -> int:
        """The longest binary name whose encoding fits ``max_length``."""
        return self.max_length * 6 // 8

    def encode(self, raw: bytes) -> str:
        """Encode a binary name.

        Raises:
            ValueError: If the name is empty or its encoding exceeds ``max_length``.
        """
        if not raw:
            raise ValueError("name must not be empty")
        if encoded_length(len(raw), padding=False) > self.max_length:
            raise ValueError(f"name of {len(raw)} bytes exceeds {self.max_length} characters")
        return self.codec.encode(raw)

    def decode(self, name: str) -> bytes:
        """Decode an encoded name.

        Raises:
            DecodeError: If the name is not unpadded URL-safe Base64.
            ValueError: If the name is empty or longer than ``max_length``.
        """
        if not name or len(name) > self.max_length:
            raise ValueError("name length out of range")
        return self.codec.decode(name)
