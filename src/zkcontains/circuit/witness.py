"""Partial witness: the prover's assignment of values to circuit wires."""

from zkcontains.circuit.errors import WitnessError
from zkcontains.circuit.wires import Wire
from zkcontains.config import GOLDILOCKS_MODULUS


class PartialWitness:
    """Values bound by the prover to the wires of a circuit.

    Every input wire of a circuit must be bound before proving; derived wires may be bound too, in which case the
    prover checks that the bound value is the one the circuit computes.
    """

    def __init__(self, modulus: int = GOLDILOCKS_MODULUS):
        self.modulus = modulus
        self.values: dict[Wire, int] = {}

    def set_wire(self, wire: Wire, value: int) -> None:
        """Bind `value` to `wire`.

        Raises:
            WitnessError: If `value` is not a canonical field element, or if `wire` is already bound to a
                different value.
        """
        if not 0 <= value < self.modulus:
            msg = "Witness value is not a canonical field element: "
            msg += f"wire: {wire.index}, value: {value}, modulus: {self.modulus}"
            raise WitnessError(msg)

        bound = self.values.get(wire)
        if bound is not None and bound != value:
            msg = "Wire bound to two different values: "
            msg += f"wire: {wire.index}, first value: {bound}, second value: {value}"
            raise WitnessError(msg)

        self.values[wire] = value

    def set_wires(self, wires: list[Wire], values: list[int]) -> None:
        """Bind `values[i]` to `wires[i]` for every i."""
        if len(wires) != len(values):
            msg = "The number of wires and values must match: "
            msg += f"wires: {len(wires)}, values: {len(values)}"
            raise WitnessError(msg)

        for wire, value in zip(wires, values):
            self.set_wire(wire, value)

    def get_wire(self, wire: Wire) -> int:
        """Return the value bound to `wire`.

        Raises:
            WitnessError: If `wire` is unbound.
        """
        if wire not in self.values:
            msg = f"Wire {wire.index} is not bound in the witness."
            raise WitnessError(msg)
        return self.values[wire]

    def __contains__(self, wire: Wire) -> bool:
        return wire in self.values

    def __len__(self) -> int:
        return len(self.values)
