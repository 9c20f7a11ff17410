"""Configuration of containment circuits."""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Self

# Goldilocks prime: 2^64 - 2^32 + 1
GOLDILOCKS_MODULUS = 0xFFFFFFFF00000001


@dataclass(frozen=True)
class CircuitConfig:
    """Parameters shared by every circuit built with a `CircuitBuilder`.

    Attributes:
        modulus (int): The prime modulus of the field the circuit works over. Must be larger than 255 so that
            every byte is a distinct field element.
        range_check_inputs (bool): If `True`, the verifier checks that every input value is a canonical field
            element.
        false_positive_rate (float): False-positive rate of the bloom pre-filter used by membership circuits.
        expose_texts (bool): If `True`, the reference and pattern wires are registered as public values ahead of
            the results.
        confirm_matches (bool): If `True`, membership circuits confirm every query the pre-filter accepts with
            in-circuit equality against the reference collection.
    """

    modulus: int = GOLDILOCKS_MODULUS
    range_check_inputs: bool = True
    false_positive_rate: float = 0.01
    expose_texts: bool = False
    confirm_matches: bool = False

    def __post_init__(self):
        if self.modulus <= 255:
            msg = "The modulus must be larger than 255: "
            msg += f"modulus: {self.modulus}"
            raise ValueError(msg)
        if not 0 < self.false_positive_rate < 1:
            msg = "The false positive rate must be in (0, 1): "
            msg += f"false_positive_rate: {self.false_positive_rate}"
            raise ValueError(msg)

    @classmethod
    def standard(cls) -> Self:
        """Return the default configuration: Goldilocks field, range-checked inputs, 1% false-positive rate."""
        return cls()

    @classmethod
    def from_toml(cls, path: str | Path) -> Self:
        """Load the configuration from the `[circuit]` table of a TOML file.

        Keys missing from the table take their default value.

        Raises:
            ValueError: If the table contains unknown keys.
        """
        with Path(path).open("rb") as f:
            data = tomllib.load(f)

        circuit = data.get("circuit", {})
        unknown = set(circuit) - {field.name for field in fields(cls)}
        if unknown:
            msg = "Unknown circuit configuration keys: "
            msg += f"{sorted(unknown)}"
            raise ValueError(msg)

        return cls(**circuit)
