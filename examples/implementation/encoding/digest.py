"""Qualified digest encoding.

This module provides the Hasher class, which encodes Blake3-256 digests as
44-character URL-safe Base64 text carrying a one-character type code.
"""

import blake3

from varbase64 import Base64Codec, CodecConfig, DecodeError, Variant
from varbase64.interfaces.crypto import IHasher

BLAKE3_256_CODE = "E"
QUALIFIED_LENGTH = 44


class Hasher(IHasher):
    """Hasher that uses Blake3 and implements IHasher.

    A 32-byte digest is prefixed with one zero byte so the 33 bytes encode to
    exactly 44 symbols without padding. The leading symbol, always ``A``, is
    then replaced with the type code ``E``.
    """

    def __init__(self) -> None:
        self.codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))

    async def sum(self, message: str) -> str:
        """Compute the qualified digest of a message.

        Args:
            message: The message to hash. It is UTF-8 encoded first.

        Returns:
            A 44-character string starting with "E".
        """
        digest = blake3.blake3(message.encode("utf-8")).digest()
        return self.qualify(digest)

    def qualify(self, digest: bytes) -> str:
        """Encode a raw 32-byte digest in qualified form."""
        if len(digest) != 32:
            raise ValueError("expected a 32-byte digest")
        encoded = self.codec.encode(bytes(1) + digest)
        return BLAKE3_256_CODE + encoded[1:]

    def unqualify(self, qualified: str) -> bytes:
        """Recover the raw digest from its qualified form.

        Raises:
            DecodeError: If the text is not a qualified Blake3-256 digest.
        """
        if len(qualified) != QUALIFIED_LENGTH or not qualified.startswith(BLAKE3_256_CODE):
            raise DecodeError("not a qualified blake3-256 digest")
        raw = self.codec.decode("A" + qualified[1:])
        if raw[0] != 0:
            raise DecodeError("not a qualified blake3-256 digest")
        return raw[1:]
