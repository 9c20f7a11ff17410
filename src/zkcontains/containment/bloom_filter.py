"""Bloom filter used to pre-screen membership queries."""

import hashlib
import math
from typing import Self


class BloomFilter:
    """Approximate set of byte strings, with no false negatives.

    Bit positions are derived by double hashing a BLAKE2b digest of the element:
    `index_i = (h_1 + i * h_2) mod num_bits` for `i` in `[0, num_hashes)`.

    Attributes:
        num_bits (int): The number of bits of the filter.
        num_hashes (int): The number of bit positions set per element.
        bits (bytearray): The bits of the filter.
        num_inserted (int): The number of insertions performed.
    """

    def __init__(self, num_bits: int, num_hashes: int):
        if num_bits <= 0 or num_hashes <= 0:
            msg = "The number of bits and hashes must be positive: "
            msg += f"num_bits: {num_bits}, num_hashes: {num_hashes}"
            raise ValueError(msg)

        self.num_bits = num_bits
        self.num_hashes = num_hashes
        self.bits = bytearray((num_bits + 7) // 8)
        self.num_inserted = 0

    @classmethod
    def with_rate(cls, false_positive_rate: float, expected_items: int) -> Self:
        """Return a filter sized for `expected_items` elements at the given false-positive rate.

        The filter has `ceil(-n ln(p) / ln(2)^2)` bits and `ceil(num_bits / n * ln(2))` hash functions, where `n` is
        `expected_items` and `p` is `false_positive_rate`.
        """
        if not 0 < false_positive_rate < 1:
            msg = "The false positive rate must be in (0, 1): "
            msg += f"false_positive_rate: {false_positive_rate}"
            raise ValueError(msg)
        if expected_items <= 0:
            msg = "The number of expected items must be positive: "
            msg += f"expected_items: {expected_items}"
            raise ValueError(msg)

        num_bits = math.ceil(-expected_items * math.log(false_positive_rate) / math.log(2) ** 2)
        num_hashes = math.ceil(num_bits / expected_items * math.log(2))
        return cls(num_bits, num_hashes)

    def _indexes(self, data: bytes):
        digest = hashlib.blake2b(data, digest_size=16).digest()
        h1 = int.from_bytes(digest[:8], "big")
        h2 = int.from_bytes(digest[8:], "big") | 1
        for i in range(self.num_hashes):
            yield (h1 + i * h2) % self.num_bits

    def insert(self, data: bytes) -> None:
        for index in self._indexes(data):
            self.bits[index // 8] |= 1 << (index % 8)
        self.num_inserted += 1

    def contains(self, data: bytes) -> bool:
        """Return `True` if `data` is possibly in the set, `False` if it is certainly not."""
        return all(self.bits[index // 8] & (1 << (index % 8)) for index in self._indexes(data))

    def __contains__(self, data: bytes) -> bool:
        return self.contains(data)
