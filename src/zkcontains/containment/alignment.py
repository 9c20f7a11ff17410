"""Alignment matcher: exact substring containment as a brute-force search over offsets."""

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.wires import BoolWire, Wire


def aligned_match(builder: CircuitBuilder, reference: list[Wire], pattern: list[Wire], offset: int) -> BoolWire:
    """Return a boolean wire set iff `reference[offset:offset + len(pattern)] == pattern`.

    The match flag is the conjunction of the equality tests at every position of the pattern: each test is
    folded into the running flag with `and_`, it never replaces it.

    Args:
        builder (CircuitBuilder): The builder of the circuit.
        reference (list[Wire]): The wires of the reference text.
        pattern (list[Wire]): The wires of the pattern.
        offset (int): The position in `reference` the pattern is aligned with.

    Raises:
        ValueError: If the pattern does not fit in the reference at `offset`.
    """
    if not 0 <= offset <= len(reference) - len(pattern):
        msg = "The pattern does not fit in the reference at this offset: "
        msg += f"offset: {offset}, reference length: {len(reference)}, pattern length: {len(pattern)}"
        raise ValueError(msg)

    match_flag = builder.true()
    for j, symbol in enumerate(pattern):
        match_flag = builder.and_(match_flag, builder.is_equal(reference[offset + j], symbol))

    return match_flag


def alignment_signals(builder: CircuitBuilder, reference: list[Wire], pattern: list[Wire]) -> list[BoolWire]:
    """Return one match signal per offset of `pattern` in `reference`.

    Every offset in `[0, len(reference) - len(pattern)]` is compiled, whatever the witness.

    Notes:
        - An empty pattern is contained in every reference: the only signal is `builder.true()`.
        - A pattern longer than the reference has no offset: the list of signals is empty.
    """
    if len(pattern) == 0:
        return [builder.true()]
    if len(pattern) > len(reference):
        return []

    return [aligned_match(builder, reference, pattern, offset) for offset in range(len(reference) - len(pattern) + 1)]
