import random

import pytest

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.config import GOLDILOCKS_MODULUS
from zkcontains.fields.field_encoder import (
    add_text_wires,
    field_elements_to_bytes,
    string_to_field_elements,
    text_to_bytes,
)

rng = random.Random(0)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("zk", [122, 107]),
        (b"\x00\xff", [0, 255]),
        ("é", [0xC3, 0xA9]),
    ],
)
def test_string_to_field_elements(text, expected):
    assert string_to_field_elements(text) == expected


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"plonky2_example",
        bytes(range(256)),
        *[bytes(rng.randrange(256) for _ in range(rng.randrange(1, 40))) for _ in range(10)],
    ],
)
@pytest.mark.parametrize("modulus", [GOLDILOCKS_MODULUS, 257, 2**31 - 1])
def test_encoding_round_trip(data, modulus):
    elements = string_to_field_elements(data, modulus)
    assert len(elements) == len(data)
    assert all(0 <= element < modulus for element in elements)
    assert field_elements_to_bytes(elements, modulus) == data


def test_decoding_takes_canonical_residue():
    assert field_elements_to_bytes([GOLDILOCKS_MODULUS + 65, 2 * GOLDILOCKS_MODULUS + 66]) == b"AB"


def test_decoding_rejects_non_bytes():
    with pytest.raises(ValueError, match="Field element does not encode a byte: index: 1, residue: 256"):
        field_elements_to_bytes([1, 256])


@pytest.mark.parametrize("modulus", [2, 255])
def test_small_modulus(modulus):
    with pytest.raises(ValueError, match="The modulus must be larger than 255"):
        string_to_field_elements("abc", modulus)


def test_text_to_bytes():
    assert text_to_bytes("merkle_tree") == b"merkle_tree"
    assert text_to_bytes(bytearray(b"\x01\x02")) == b"\x01\x02"


def test_add_text_wires():
    builder = CircuitBuilder()
    wires = add_text_wires(builder, 5)
    assert len(wires) == 5
    assert wires == builder.virtual_wires
    assert [wire.index for wire in wires] == list(range(5))
