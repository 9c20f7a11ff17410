import math

import pytest

from zkcontains.containment.bloom_filter import BloomFilter


@pytest.mark.parametrize(
    ("false_positive_rate", "expected_items", "num_bits", "num_hashes"),
    [
        (0.01, 23, 221, 7),
        (0.01, 1000, 9586, 7),
        (0.1, 100, 480, 4),
    ],
)
def test_with_rate_sizing(false_positive_rate, expected_items, num_bits, num_hashes):
    sketch = BloomFilter.with_rate(false_positive_rate, expected_items)
    assert sketch.num_bits == num_bits
    assert sketch.num_hashes == num_hashes
    assert len(sketch.bits) == math.ceil(num_bits / 8)


@pytest.mark.parametrize(
    ("false_positive_rate", "expected_items", "msg"),
    [
        (0, 10, "The false positive rate must be in"),
        (1, 10, "The false positive rate must be in"),
        (0.01, 0, "The number of expected items must be positive"),
    ],
)
def test_with_rate_errors(false_positive_rate, expected_items, msg):
    with pytest.raises(ValueError, match=msg):
        BloomFilter.with_rate(false_positive_rate, expected_items)


def test_invalid_size():
    with pytest.raises(ValueError, match="The number of bits and hashes must be positive"):
        BloomFilter(0, 3)


def test_no_false_negatives():
    sketch = BloomFilter.with_rate(0.01, 500)
    elements = [f"element_{i}".encode() for i in range(500)]
    for element in elements:
        sketch.insert(element)

    assert sketch.num_inserted == 500
    assert all(element in sketch for element in elements)


def test_no_false_negatives_when_overfilled():
    sketch = BloomFilter.with_rate(0.01, 10)
    elements = [i.to_bytes(4, "big") for i in range(200)]
    for element in elements:
        sketch.insert(element)

    assert all(sketch.contains(element) for element in elements)


@pytest.mark.parametrize("false_positive_rate", [0.01, 0.05])
def test_false_positive_rate(false_positive_rate):
    n_inserted = 1000
    n_queries = 20000
    sketch = BloomFilter.with_rate(false_positive_rate, n_inserted)
    for i in range(n_inserted):
        sketch.insert(f"inserted_{i}".encode())

    false_positives = sum(f"absent_{i}".encode() in sketch for i in range(n_queries))
    assert false_positives / n_queries <= false_positive_rate + 0.01


def test_empty_filter_contains_nothing():
    sketch = BloomFilter.with_rate(0.01, 100)
    assert b"" not in sketch
    assert b"merkle_tree" not in sketch
