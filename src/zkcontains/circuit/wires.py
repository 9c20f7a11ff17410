"""Classes defining the wires of a circuit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Wire:
    """Handle to a value in a circuit.

    Attributes:
        index (int): the position of the wire in the circuit, in allocation order.
        builder_id (int): identifier of the `CircuitBuilder` that allocated the wire.
    """

    index: int
    builder_id: int


@dataclass(frozen=True)
class BoolWire(Wire):
    """Wire whose value is constrained to be either 0 or 1.

    Attributes:
        index (int): the position of the wire in the circuit, in allocation order.
        builder_id (int): identifier of the `CircuitBuilder` that allocated the wire.
    """
