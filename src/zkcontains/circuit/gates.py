"""Gates of a containment circuit and their Bitcoin Script evaluation."""

from dataclasses import dataclass
from enum import Enum

from tx_engine import Script
from tx_engine.engine.op_codes import (
    OP_BOOLAND,
    OP_BOOLOR,
    OP_DROP,
    OP_ELSE,
    OP_ENDIF,
    OP_IF,
    OP_NIP,
    OP_NOT,
    OP_NUMEQUAL,
)

from zkcontains.util.utility_scripts import nums_to_script


class GateType(Enum):
    CONSTANT = "constant"
    IS_EQUAL = "is_equal"
    AND = "and"
    OR = "or"
    NOT = "not"
    SELECT = "select"


@dataclass(frozen=True)
class Gate:
    """A gate computing the value of the wire `output` from the wires `inputs`.

    Attributes:
        gate_type (GateType): The operation performed by the gate.
        output (int): Index of the wire the gate defines.
        inputs (tuple[int, ...]): Indices of the wires the gate reads. For `SELECT` gates the order is
            `(flag, if_true, if_false)`.
        constant (int | None): The value of a `CONSTANT` gate.
    """

    gate_type: GateType
    output: int
    inputs: tuple[int, ...] = ()
    constant: int | None = None

    @property
    def operands(self) -> tuple[int, ...]:
        """The input wires in the order they are picked onto the stack before `self.operation()`."""
        if self.gate_type == GateType.SELECT:
            flag, if_true, if_false = self.inputs
            return (if_true, if_false, flag)
        return self.inputs

    def evaluate(self, values: dict[int, int]) -> int:
        """Compute the value of the output wire from the values of the input wires."""
        args = [values[i] for i in self.inputs]
        match self.gate_type:
            case GateType.CONSTANT:
                return self.constant
            case GateType.IS_EQUAL:
                return int(args[0] == args[1])
            case GateType.AND:
                return int(args[0] != 0 and args[1] != 0)
            case GateType.OR:
                return int(args[0] != 0 or args[1] != 0)
            case GateType.NOT:
                return int(args[0] == 0)
            case GateType.SELECT:
                return args[1] if args[0] != 0 else args[2]

    def operation(self) -> Script:
        """Script computing the output of the gate.

        Stack input:
            - stack:    [..., operands[0], ..., operands[-1]]
            - altstack: []

        Stack output:
            - stack:    [..., output]
            - altstack: []
        """
        match self.gate_type:
            case GateType.CONSTANT:
                return nums_to_script([self.constant])
            case GateType.IS_EQUAL:
                return Script([OP_NUMEQUAL])
            case GateType.AND:
                return Script([OP_BOOLAND])
            case GateType.OR:
                return Script([OP_BOOLOR])
            case GateType.NOT:
                return Script([OP_NOT])
            case GateType.SELECT:
                # stack in:  [..., if_true, if_false, flag]
                # stack out: [..., if_true if flag else if_false]
                return Script([OP_IF, OP_DROP, OP_ELSE, OP_NIP, OP_ENDIF])
