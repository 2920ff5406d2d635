"""Tests for the configured codec and the block strategy."""

from __future__ import annotations

import itertools
import random
from dataclasses import FrozenInstanceError
from typing import Callable

import pytest

from varbase64 import (
    Base64Codec,
    CodecConfig,
    DecodeError,
    Strategy,
    Variant,
    decode_into,
    encode_into,
    encoded_length,
    max_decoded_length,
)
from varbase64.codec import block_decode_into, block_encode_into

CONFIGS = [
    CodecConfig(variant=variant, padding=padding, strategy=strategy)
    for variant, padding, strategy in itertools.product(Variant, (True, False), Strategy)
]

# Short inputs that exercise every tail shape and every rejection path
SAMPLES = [
    b"",
    b"A",
    b"AA",
    b"AAA",
    b"AAAA",
    b"AA==",
    b"AAA=",
    b"A===",
    b"====",
    b"AA=A",
    b"=AAA",
    b"/w==",
    b"/x==",
    b"//8=",
    b"//9=",
    b"/w",
    b"/x",
    b"//8",
    b"//9",
    b"+/8=",
    b"-_8=",
    b"+,8=",
    b"Zm9vYmFy",
    b"Zm9vYg==",
    b"Zm9vYg",
    b"Zm9vY",
    b"Zm9vYmE=",
    b"Zm9v!mE=",
    b"AA==AAAA",
    b"AAAA=",
]


def _run(
    fn: Callable[..., int], symbols: bytes, padding: bool, variant: Variant
) -> bytes | None:
    dest = bytearray(max_decoded_length(len(symbols)))
    try:
        written = fn(symbols, dest, padding, variant)
    except DecodeError:
        return None
    return bytes(dest[:written])


def test_default_config() -> None:
    """Test that the default codec is padded STANDARD."""
    codec = Base64Codec()

    assert codec.config == CodecConfig(Variant.STANDARD, True, Strategy.ACCUMULATOR)
    assert codec.encode(b"\x00") == "AA=="


def test_config_is_frozen() -> None:
    """Test that a codec's configuration cannot change after construction."""
    config = CodecConfig()

    with pytest.raises(FrozenInstanceError):
        config.padding = False  # type: ignore[misc]


@pytest.mark.parametrize("config", CONFIGS)
def test_codec_round_trip(config: CodecConfig) -> None:
    """Test that each configuration round-trips random data."""
    codec = Base64Codec(config)
    rng = random.Random(3)

    for n in range(0, 50):
        data = rng.randbytes(n)
        text = codec.encode(data)
        assert isinstance(text, str)
        assert codec.decode(text) == data
        assert codec.decode(text.encode("ascii")) == data


def test_url_safe_unpadded_codec() -> None:
    """Test the configuration used for tokens and filenames."""
    codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))

    assert codec.encode(b"\xfb\xff") == "-_8"
    assert codec.decode("-_8") == b"\xfb\xff"
    assert not codec.is_valid("-_8=")
    assert not codec.is_valid("+/8")


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("padding", [True, False])
def test_block_encoder_matches_accumulator(variant: Variant, padding: bool) -> None:
    """Test that both encoders produce identical symbols."""
    rng = random.Random(11)
    for n in range(0, 40):
        data = rng.randbytes(n)
        expected = bytearray(encoded_length(n, padding))
        actual = bytearray(encoded_length(n, padding))

        assert encode_into(data, expected, padding, variant) == block_encode_into(
            data, actual, padding, variant
        )
        assert actual == expected


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("padding", [True, False])
def test_block_decoder_matches_accumulator(variant: Variant, padding: bool) -> None:
    """Test that both decoders accept and reject exactly the same inputs."""
    for symbols in SAMPLES:
        assert _run(block_decode_into, symbols, padding, variant) == _run(
            decode_into, symbols, padding, variant
        ), symbols


@pytest.mark.parametrize("padding", [True, False])
def test_block_decoder_matches_accumulator_on_mutations(padding: bool) -> None:
    """Test agreement on random single-symbol mutations of valid text."""
    rng = random.Random(5)
    alphabet = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=-_,!"

    for _ in range(500):
        data = rng.randbytes(rng.randrange(0, 10))
        codec = Base64Codec(CodecConfig(padding=padding))
        symbols = bytearray(codec.encode_bytes(data))
        if symbols:
            symbols[rng.randrange(len(symbols))] = rng.choice(alphabet)
        if rng.random() < 0.3:
            symbols = symbols[: rng.randrange(len(symbols) + 1)]
        for variant in Variant:
            assert _run(block_decode_into, bytes(symbols), padding, variant) == _run(
                decode_into, bytes(symbols), padding, variant
            ), bytes(symbols)


@pytest.mark.parametrize("encoded", [b"AAAAAA", b"AAAAA=", b"AAAAAAA"])
def test_block_decoder_padded_group_sized_buffer(encoded: bytes) -> None:
    """Test that the block decoder also reports a broken padded tail as DecodeError."""
    dest = bytearray(len(encoded) // 4 * 3)

    with pytest.raises(DecodeError):
        block_decode_into(encoded, dest, True, Variant.STANDARD)


@pytest.mark.parametrize("strategy", list(Strategy))
def test_codec_accepts_non_contiguous_views(strategy: Strategy) -> None:
    """Test both strategies with strided memoryview input."""
    codec = Base64Codec(CodecConfig(strategy=strategy))

    assert codec.encode(memoryview(b"f.o.o.")[::2]) == "Zm9v"
    assert codec.decode(memoryview(b"Z?m?9?v?")[::2]) == b"foo"
