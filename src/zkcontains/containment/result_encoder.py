"""Result encoder: boolean wires to public field values."""

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.wires import BoolWire, Wire


def register_result(builder: CircuitBuilder, flag: BoolWire) -> Wire:
    """Register `flag` as a public value: the field one if set, the field zero otherwise.

    Returns:
        The registered wire.
    """
    result = builder.select(flag, builder.constant(1), builder.constant(0))
    builder.register_public_input(result)
    return result


def decode_results(values: list[int]) -> list[bool]:
    """Map public values produced by `register_result` back to booleans.

    Raises:
        ValueError: If a value is neither the field one nor the field zero.
    """
    results = []
    for ix, value in enumerate(values):
        if value not in (0, 1):
            msg = "Public value is not a boolean result: "
            msg += f"index: {ix}, value: {value}"
            raise ValueError(msg)
        results.append(value == 1)
    return results
