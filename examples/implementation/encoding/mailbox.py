"""IMAP mailbox name encoding.

This module implements the modified UTF-7 encoding used for IMAP mailbox
names (RFC 3501, section 5.1.3). Printable US-ASCII characters represent
themselves, "&" is written as "&-", and every other run of characters is
written as "&" + unpadded Base64 of its UTF-16BE form + "-", using the
mailbox-safe alphabet where "," replaces "/".
"""

from typing import List

from varbase64 import Base64Codec, CodecConfig, DecodeError, Variant

SHIFT = "&"
UNSHIFT = "-"


def _is_direct(ch: str) -> bool:
    return 0x20 <= ord(ch) <= 0x7E


class MailboxName:
    """Encoder and decoder for modified UTF-7 mailbox names."""

    def __init__(self) -> None:
        self.codec = Base64Codec(CodecConfig(variant=Variant.MAILBOX_SAFE, padding=False))

    def encode(self, name: str) -> str:
        """Encode a mailbox name.

        Args:
            name: The mailbox name as Unicode text.

        Returns:
            The modified UTF-7 form, which is printable US-ASCII.

        Example:
            >>> MailboxName().encode("~peter/mail/台北/日本語")
            '~peter/mail/&U,BTFw-/&ZeVnLIqe-'
        """
        parts: List[str] = []
        run: List[str] = []

        def flush() -> None:
            if run:
                encoded = self.codec.encode("".join(run).encode("utf-16-be"))
                parts.append(SHIFT + encoded + UNSHIFT)
                run.clear()

        for ch in name:
            if _is_direct(ch):
                flush()
                parts.append(SHIFT + UNSHIFT if ch == SHIFT else ch)
            else:
                run.append(ch)
        flush()

        return "".join(parts)

    def decode(self, encoded: str) -> str:
        """Decode a modified UTF-7 mailbox name.

        Args:
            encoded: The encoded mailbox name.

        Returns:
            The mailbox name as Unicode text.

        Raises:
            DecodeError: If the name is not valid modified UTF-7.
        """
        parts: List[str] = []
        i = 0

        while i < len(encoded):
            ch = encoded[i]
            if ch != SHIFT:
                if not _is_direct(ch):
                    raise DecodeError(f"unexpected character at offset {i}")
                parts.append(ch)
                i += 1
                continue

            end = encoded.find(UNSHIFT, i + 1)
            if end < 0:
                raise DecodeError("unterminated shift sequence")
            chunk = encoded[i + 1 : end]
            i = end + 1

            if not chunk:
                parts.append(SHIFT)
                continue

            raw = self.codec.decode(chunk)
            if len(raw) % 2:
                raise DecodeError("shift sequence is not whole UTF-16 units")
            try:
                text = raw.decode("utf-16-be")
            except UnicodeDecodeError:
                raise DecodeError("shift sequence is not valid UTF-16") from None
            # printable ASCII must never be shifted
            if any(_is_direct(c) for c in text):
                raise DecodeError("shift sequence encodes printable ASCII")
            parts.append(text)

        return "".join(parts)
