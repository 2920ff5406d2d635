"""Tests for the variant alphabets and lookup tables."""

from __future__ import annotations

import pytest

from varbase64 import INVALID, PAD, Variant, forward_table, reverse_table


@pytest.mark.parametrize(
    ("variant", "tail"),
    [
        (Variant.STANDARD, b"+/"),
        (Variant.URL_SAFE, b"-_"),
        (Variant.MAILBOX_SAFE, b"+,"),
    ],
)
def test_alphabet_ends_with_variant_symbols(variant: Variant, tail: bytes) -> None:
    """Test that each alphabet differs only in the symbols for 62 and 63."""
    alphabet = forward_table(variant)

    assert len(alphabet) == 64
    assert alphabet[:62] == b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    assert alphabet[62:] == tail


def test_variant_set_is_closed() -> None:
    """Test that exactly three variants exist."""
    assert {v.name for v in Variant} == {"STANDARD", "URL_SAFE", "MAILBOX_SAFE"}


@pytest.mark.parametrize("variant", list(Variant))
def test_forward_table_is_a_bijection(variant: Variant) -> None:
    """Test that no symbol is used for two values."""
    assert len(set(forward_table(variant))) == 64


@pytest.mark.parametrize("variant", list(Variant))
def test_reverse_inverts_forward(variant: Variant) -> None:
    """Test that reverse(forward(v)) == v for every 6-bit value."""
    alphabet = forward_table(variant)
    reverse = reverse_table(variant)

    for value in range(64):
        assert reverse[alphabet[value]] == value


@pytest.mark.parametrize("variant", list(Variant))
def test_reverse_marks_everything_else_invalid(variant: Variant) -> None:
    """Test that bytes outside the alphabet, '=' included, are invalid."""
    alphabet = set(forward_table(variant))
    reverse = reverse_table(variant)

    assert len(reverse) == 256
    assert reverse[PAD] == INVALID
    for symbol in range(256):
        if symbol not in alphabet:
            assert reverse[symbol] == INVALID


def test_tables_are_immutable() -> None:
    """Test that the tables cannot be modified in place."""
    with pytest.raises(TypeError):
        reverse_table(Variant.STANDARD)[0] = 0  # type: ignore[index]
    with pytest.raises(TypeError):
        forward_table(Variant.STANDARD)[0] = 0  # type: ignore[index]
