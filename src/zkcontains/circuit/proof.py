"""Proofs produced by `CircuitData.prove`."""

from dataclasses import dataclass

from tx_engine import Script

from zkcontains.util.utility_scripts import nums_to_script


@dataclass
class Proof:
    """Class encapsulating the data required to generate the unlocking script of a circuit verifier.

    Attributes:
        public_values (list[int]): The public values of the circuit, in registration order.
        witness_values (list[int]): The values of the input wires, in allocation order.
        circuit_digest (str): Hex digest of the verifier script the proof was computed for.
    """

    public_values: list[int]
    witness_values: list[int]
    circuit_digest: str

    def to_unlocking_script(self) -> Script:
        """Return the unlocking script required by the circuit verifier.

        Stack output:
            - stack:    [public_values[0], ..., public_values[-1], witness_values[0], ..., witness_values[-1]]
            - altstack: []
        """
        out = nums_to_script(self.public_values)
        out += nums_to_script(self.witness_values)
        return out

    def to_bytes(self) -> bytes:
        """Serialise the proof as the raw bytes of its unlocking script."""
        return self.to_unlocking_script().raw_serialize()

    def size(self) -> int:
        """Size of the serialised proof in bytes."""
        return len(self.to_bytes())
