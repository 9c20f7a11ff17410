"""Match aggregator."""

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.wires import BoolWire


def any_of(builder: CircuitBuilder, signals: list[BoolWire]) -> BoolWire:
    """Return the disjunction of `signals`.

    The fold starts from `builder.false()` and folds every signal, so an empty list of signals is false.
    """
    contains_flag = builder.false()
    for signal in signals:
        contains_flag = builder.or_(contains_flag, signal)
    return contains_flag
