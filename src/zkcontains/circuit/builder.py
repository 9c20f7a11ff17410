"""Circuit builder: allocates wires and records the gates of a circuit."""

import itertools
import logging

from zkcontains.circuit.circuit_data import CircuitData
from zkcontains.circuit.gates import Gate, GateType
from zkcontains.circuit.wires import BoolWire, Wire
from zkcontains.config import CircuitConfig

logger = logging.getLogger(__name__)

_builder_ids = itertools.count()


class CircuitBuilder:
    """Builder for a single circuit.

    Every wire handed out by a builder is tagged with the builder's identifier, and using it with a different
    builder raises `ValueError`. Once `build` is called the builder can no longer be modified.

    Attributes:
        config (CircuitConfig): The configuration of the circuit.
        builder_id (int): Identifier of the builder, unique in the process.
        num_wires (int): Number of wires allocated so far.
        virtual_wires (list[Wire]): The input wires, in allocation order.
        gates (list[Gate]): The gates, in the order they were added.
        public_wires (list[Wire]): The wires registered as public values, in registration order.
    """

    def __init__(self, config: CircuitConfig | None = None):
        """Initialise an empty circuit.

        Args:
            config (CircuitConfig | None): The configuration of the circuit. Defaults to
                `CircuitConfig.standard()`.
        """
        self.config = config if config is not None else CircuitConfig.standard()
        self.builder_id = next(_builder_ids)
        self.num_wires = 0
        self.virtual_wires: list[Wire] = []
        self.gates: list[Gate] = []
        self.public_wires: list[Wire] = []
        self.constants: dict[int, int] = {}
        self.is_built = False

    def add_virtual_wire(self) -> Wire:
        """Allocate an input wire, whose value is supplied by the witness."""
        self._check_not_built()
        wire = Wire(self._allocate(), self.builder_id)
        self.virtual_wires.append(wire)
        return wire

    def add_virtual_wires(self, n: int) -> list[Wire]:
        """Allocate `n` input wires."""
        return [self.add_virtual_wire() for _ in range(n)]

    def constant(self, value: int) -> Wire:
        """Return a wire fixed to `value`.

        Constants are shared: asking twice for the same value returns the same wire.
        """
        self._check_not_built()
        value = value % self.config.modulus
        if value not in self.constants:
            index = self._allocate()
            self.gates.append(Gate(GateType.CONSTANT, index, constant=value))
            self.constants[value] = index
        return Wire(self.constants[value], self.builder_id)

    def true(self) -> BoolWire:
        return BoolWire(self.constant(1).index, self.builder_id)

    def false(self) -> BoolWire:
        return BoolWire(self.constant(0).index, self.builder_id)

    def is_equal(self, x: Wire, y: Wire) -> BoolWire:
        """Return a boolean wire set to 1 if `x == y`, 0 otherwise."""
        return BoolWire(self._add_gate(GateType.IS_EQUAL, x, y), self.builder_id)

    def and_(self, x: BoolWire, y: BoolWire) -> BoolWire:
        return BoolWire(self._add_gate(GateType.AND, x, y), self.builder_id)

    def or_(self, x: BoolWire, y: BoolWire) -> BoolWire:
        return BoolWire(self._add_gate(GateType.OR, x, y), self.builder_id)

    def not_(self, x: BoolWire) -> BoolWire:
        return BoolWire(self._add_gate(GateType.NOT, x), self.builder_id)

    def select(self, flag: BoolWire, if_true: Wire, if_false: Wire) -> Wire:
        """Return a wire equal to `if_true` if `flag` is set, `if_false` otherwise."""
        return Wire(self._add_gate(GateType.SELECT, flag, if_true, if_false), self.builder_id)

    def register_public_input(self, wire: Wire) -> None:
        """Append `wire` to the public values of the circuit."""
        self._check_not_built()
        self._check_wire(wire)
        self.public_wires.append(wire)

    def register_public_inputs(self, wires: list[Wire]) -> None:
        for wire in wires:
            self.register_public_input(wire)

    def build(self) -> CircuitData:
        """Finalise the circuit and compile its verifier.

        Returns:
            The compiled circuit.
        """
        self._check_not_built()
        self.is_built = True
        data = CircuitData(
            config=self.config,
            builder_id=self.builder_id,
            num_wires=self.num_wires,
            virtual_wires=list(self.virtual_wires),
            gates=list(self.gates),
            public_wires=list(self.public_wires),
        )
        logger.debug("Built circuit %d: %s", self.builder_id, data.stats)
        return data

    def _allocate(self) -> int:
        index = self.num_wires
        self.num_wires += 1
        return index

    def _add_gate(self, gate_type: GateType, *inputs: Wire) -> int:
        self._check_not_built()
        for wire in inputs:
            self._check_wire(wire)
        index = self._allocate()
        self.gates.append(Gate(gate_type, index, tuple(wire.index for wire in inputs)))
        return index

    def _check_wire(self, wire: Wire) -> None:
        if wire.builder_id != self.builder_id:
            msg = "Wire belongs to a different circuit: "
            msg += f"wire builder: {wire.builder_id}, builder: {self.builder_id}"
            raise ValueError(msg)
        assert 0 <= wire.index < self.num_wires, f"Wire {wire.index} was not allocated by this builder."

    def _check_not_built(self) -> None:
        if self.is_built:
            msg = f"Circuit {self.builder_id} has already been built."
            raise ValueError(msg)
