"""Encoding of texts as sequences of field elements."""

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.wires import Wire
from zkcontains.config import GOLDILOCKS_MODULUS


def text_to_bytes(text: str | bytes) -> bytes:
    """Return the bytes of `text`, encoding strings as UTF-8."""
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def string_to_field_elements(text: str | bytes, modulus: int = GOLDILOCKS_MODULUS) -> list[int]:
    """Convert a text into field elements, one per byte.

    Args:
        text (str | bytes): The text to encode. Strings are encoded as UTF-8.
        modulus (int): The modulus of the field. Must be larger than 255. Defaults to the Goldilocks prime.

    Returns:
        The list `[b_0, ..., b_{n-1}]` of the canonical field representatives of the bytes of `text`.

    Example:
        >>> string_to_field_elements("zk")
        [122, 107]
    """
    _check_modulus(modulus)
    return [byte % modulus for byte in text_to_bytes(text)]


def field_elements_to_bytes(elements: list[int], modulus: int = GOLDILOCKS_MODULUS) -> bytes:
    """Recover the bytes encoded by `string_to_field_elements`.

    Raises:
        ValueError: If the canonical residue of an element is not a byte.
    """
    _check_modulus(modulus)
    residues = [element % modulus for element in elements]
    for ix, residue in enumerate(residues):
        if residue > 255:
            msg = "Field element does not encode a byte: "
            msg += f"index: {ix}, residue: {residue}"
            raise ValueError(msg)
    return bytes(residues)


def add_text_wires(builder: CircuitBuilder, length: int) -> list[Wire]:
    """Allocate one input wire per symbol of a text of length `length`."""
    return builder.add_virtual_wires(length)


def _check_modulus(modulus: int) -> None:
    if modulus <= 255:
        msg = "The modulus must be larger than 255: "
        msg += f"modulus: {modulus}"
        raise ValueError(msg)
