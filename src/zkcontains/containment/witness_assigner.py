"""Witness assigner: binds the encoded texts to their input wires."""

from zkcontains.circuit.errors import WitnessError
from zkcontains.circuit.wires import Wire
from zkcontains.circuit.witness import PartialWitness


def assign_text(witness: PartialWitness, wires: list[Wire], elements: list[int]) -> None:
    """Bind `elements[i]` to `wires[i]` for every symbol of a text.

    Raises:
        WitnessError: If the text and its wires differ in length, or if a value cannot be bound.
    """
    if len(wires) != len(elements):
        msg = "The text does not match its wires: "
        msg += f"wires: {len(wires)}, symbols: {len(elements)}"
        raise WitnessError(msg)

    witness.set_wires(wires, elements)
