"""Base64 alphabet variants and their lookup tables.

Every variant shares the first 62 symbols (``A-Z``, ``a-z``, ``0-9``) and
differs only in the two symbols assigned to values 62 and 63. Each variant has
a forward table mapping a 6-bit value to its symbol and a reverse table mapping
any byte to its 6-bit value, or to ``INVALID`` when the byte is not part of the
alphabet.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

INVALID = -1
"""Reverse-table sentinel for bytes outside a variant's alphabet."""

PAD = ord("=")
"""The padding symbol, shared by all variants."""

_COMMON = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


class Variant(Enum):
    """Supported Base64 alphabets, named by the symbols for values 62 and 63."""

    STANDARD = b"+/"
    URL_SAFE = b"-_"
    MAILBOX_SAFE = b"+,"


def _build_reverse(alphabet: bytes) -> Tuple[int, ...]:
    table = [INVALID] * 256
    for value, symbol in enumerate(alphabet):
        table[symbol] = value
    return tuple(table)


_FORWARD: Mapping[Variant, bytes] = MappingProxyType(
    {variant: _COMMON + variant.value for variant in Variant}
)

_REVERSE: Mapping[Variant, Tuple[int, ...]] = MappingProxyType(
    {variant: _build_reverse(alphabet) for variant, alphabet in _FORWARD.items()}
)


def forward_table(variant: Variant) -> bytes:
    """Return the 64-symbol alphabet of a variant.

    Args:
        variant: The alphabet to look up.

    Returns:
        A 64-byte string where index ``v`` holds the symbol for value ``v``.
    """
    return _FORWARD[variant]


def reverse_table(variant: Variant) -> Tuple[int, ...]:
    """Return the 256-entry reverse lookup of a variant.

    Args:
        variant: The alphabet to look up.

    Returns:
        A tuple indexed by byte value holding the 6-bit value of that symbol,
        or ``INVALID`` when the byte is not in the alphabet.
    """
    return _REVERSE[variant]
