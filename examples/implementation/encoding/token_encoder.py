"""Token compression and encoding implementation.

This module provides token encoding/decoding with gzip compression and
unpadded URL-safe Base64.
"""

import gzip

from varbase64 import Base64Codec, CodecConfig, Variant
from varbase64.interfaces import IBinaryEncoder, ITokenEncoder


class TokenEncoder(ITokenEncoder):
    """Token encoder that compresses and encodes tokens.

    This class implements token encoding by:
    1. Converting the input string to UTF-8 bytes
    2. Compressing with gzip at maximum compression level (9)
    3. Encoding with URL-safe Base64 without padding

    Decoding reverses this process. Tokens carrying '=' padding are rejected.
    """

    def __init__(self, codec: IBinaryEncoder | None = None) -> None:
        """Initialize the token encoder.

        Args:
            codec: The codec used for the text form. Defaults to unpadded
                URL-safe Base64.
        """
        self.codec: IBinaryEncoder = codec or Base64Codec(
            CodecConfig(variant=Variant.URL_SAFE, padding=False)
        )

    async def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string without padding.

        Example:
            >>> encoder = TokenEncoder()
            >>> token = await encoder.encode('{"user": "alice", "role": "admin"}')
            >>> "=" in token
            False
        """
        token_bytes = object.encode("utf-8")
        compressed_token = gzip.compress(token_bytes, compresslevel=9)
        return self.codec.encode(compressed_token)

    async def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            DecodeError: If the token is not valid unpadded URL-safe Base64.
            gzip.BadGzipFile: If the token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        compressed_token = self.codec.decode(raw_token)
        object_bytes = gzip.decompress(compressed_token)
        return object_bytes.decode("utf-8")
