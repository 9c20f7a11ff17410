"""Compiled circuits: verifier script, prover and verifier."""

import hashlib
import logging
from dataclasses import dataclass

from tx_engine import Context, Script
from tx_engine.engine.op_codes import OP_1, OP_NUMEQUALVERIFY, OP_VERIFY, OP_WITHIN

from zkcontains.circuit.errors import ProofGenerationError, WitnessError
from zkcontains.circuit.gates import Gate
from zkcontains.circuit.proof import Proof
from zkcontains.circuit.wires import Wire
from zkcontains.circuit.witness import PartialWitness
from zkcontains.config import CircuitConfig
from zkcontains.util.utility_scripts import drop, nums_to_script, pick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircuitStats:
    """Structural statistics of a compiled circuit.

    Attributes:
        num_wires (int): Total number of wires.
        num_inputs (int): Number of input wires bound by the witness.
        num_gates (int): Number of gates, constants included.
        num_constants (int): Number of constant gates.
        num_public_values (int): Number of public values.
        degree_bits (int): Base-2 logarithm of the number of gates, rounded up.
        script_size (int): Size in bytes of the verifier script.
    """

    num_wires: int
    num_inputs: int
    num_gates: int
    num_constants: int
    num_public_values: int
    degree_bits: int
    script_size: int


def compile_verifier(
    modulus: int,
    virtual_wires: list[Wire],
    gates: list[Gate],
    public_wires: list[Wire],
    range_check_inputs: bool = True,
) -> Script:
    """Compile a circuit into a Bitcoin Script verifier.

    Every gate is re-evaluated on the stack, in order, picking its operands from where they were previously
    computed. The verifier then checks every public wire against the value claimed in the unlocking script.

    Stack input:
        - stack:    [public_0, ..., public_{n-1}, input_0, ..., input_{m-1}]
        - altstack: []

    Stack output:
        - stack:    [1] if every public wire equals the claimed public value, stack evaluation error otherwise
        - altstack: []

    Args:
        modulus (int): The modulus of the field.
        virtual_wires (list[Wire]): The input wires, in the order they appear in the unlocking script.
        gates (list[Gate]): The gates of the circuit, each only reading wires defined before it.
        public_wires (list[Wire]): The public wires, in the order they appear in the unlocking script.
        range_check_inputs (bool): If `True`, check that every input is in `[0, modulus)`. Defaults to `True`.

    Returns:
        The verifier script.
    """
    # Elements on the stack, bottom first: ("public", i) for claimed values, wire indices for wires
    stack: list[tuple[str, int] | int] = [("public", i) for i in range(len(public_wires))]
    stack += [wire.index for wire in virtual_wires]
    locations = {element: ix for ix, element in enumerate(stack)}

    def position(element: tuple[str, int] | int, shift: int = 0) -> int:
        return len(stack) - 1 - locations[element] + shift

    out = Script()

    if range_check_inputs:
        for wire in virtual_wires:
            # stack out: [...] or fail if input not in [0, modulus)
            out += pick(position(wire.index), 1)
            out += nums_to_script([0, modulus])
            out += Script([OP_WITHIN, OP_VERIFY])

    for gate in gates:
        # stack in:  [..., operands, ...]
        # stack out: [..., operands, ..., output]
        for shift, operand in enumerate(gate.operands):
            out += pick(position(operand, shift), 1)
        out += gate.operation()
        locations[gate.output] = len(stack)
        stack.append(gate.output)

    for i, wire in enumerate(public_wires):
        # stack out: [...] or fail if public wire != claimed value
        out += pick(position(wire.index), 1)
        out += pick(position(("public", i), 1), 1)
        out += Script([OP_NUMEQUALVERIFY])

    out += drop(len(stack))
    out += Script([OP_1])

    return out


class CircuitData:
    """A finalised circuit, able to prove and verify.

    Attributes:
        config (CircuitConfig): The configuration the circuit was built with.
        builder_id (int): Identifier of the builder the circuit was built by.
        num_wires (int): Total number of wires.
        virtual_wires (list[Wire]): The input wires.
        gates (list[Gate]): The gates.
        public_wires (list[Wire]): The public wires.
        verifier_script (Script): The compiled verifier.
        digest (str): Hex SHA-256 digest of the serialised verifier script.
    """

    def __init__(
        self,
        config: CircuitConfig,
        builder_id: int,
        num_wires: int,
        virtual_wires: list[Wire],
        gates: list[Gate],
        public_wires: list[Wire],
    ):
        self.config = config
        self.builder_id = builder_id
        self.num_wires = num_wires
        self.virtual_wires = virtual_wires
        self.gates = gates
        self.public_wires = public_wires
        self.verifier_script = compile_verifier(
            modulus=config.modulus,
            virtual_wires=virtual_wires,
            gates=gates,
            public_wires=public_wires,
            range_check_inputs=config.range_check_inputs,
        )
        self.digest = hashlib.sha256(self.verifier_script.raw_serialize()).hexdigest()

    @property
    def stats(self) -> CircuitStats:
        num_gates = len(self.gates)
        return CircuitStats(
            num_wires=self.num_wires,
            num_inputs=len(self.virtual_wires),
            num_gates=num_gates,
            num_constants=sum(1 for gate in self.gates if gate.constant is not None),
            num_public_values=len(self.public_wires),
            degree_bits=max(num_gates - 1, 0).bit_length(),
            script_size=len(self.verifier_script.raw_serialize()),
        )

    def new_witness(self) -> PartialWitness:
        """Return an empty witness over the field of the circuit."""
        return PartialWitness(self.config.modulus)

    def prove(self, witness: PartialWitness) -> Proof:
        """Compute the value of every wire from `witness` and return a proof of the public values.

        Args:
            witness (PartialWitness): Values of the input wires. Derived wires may also be bound, in which case the
                bound value must match the computed one.

        Returns:
            The proof.

        Raises:
            WitnessError: If an input wire is unbound, if a bound wire does not belong to this circuit or if a bound
                derived wire disagrees with the circuit.
            ProofGenerationError: If the verifier rejects the proof.
        """
        values: dict[int, int] = {}
        for wire, value in witness.values.items():
            if wire.builder_id != self.builder_id or not 0 <= wire.index < self.num_wires:
                msg = "Witness binds a wire that does not belong to the circuit: "
                msg += f"wire: {wire.index}, wire builder: {wire.builder_id}, circuit: {self.builder_id}"
                raise WitnessError(msg)
            if not 0 <= value < self.config.modulus:
                msg = "Witness value is not a canonical field element: "
                msg += f"wire: {wire.index}, value: {value}, modulus: {self.config.modulus}"
                raise WitnessError(msg)
            if values.setdefault(wire.index, value) != value:
                msg = "Wire bound to two different values: "
                msg += f"wire: {wire.index}, first value: {values[wire.index]}, second value: {value}"
                raise WitnessError(msg)

        missing = [wire.index for wire in self.virtual_wires if wire.index not in values]
        if missing:
            msg = "Input wires left unbound in the witness: "
            msg += f"{missing}"
            raise WitnessError(msg)

        for gate in self.gates:
            computed = gate.evaluate(values)
            if values.setdefault(gate.output, computed) != computed:
                msg = "Witness value disagrees with the circuit: "
                msg += f"wire: {gate.output}, bound: {values[gate.output]}, computed: {computed}"
                raise WitnessError(msg)

        proof = Proof(
            public_values=[values[wire.index] for wire in self.public_wires],
            witness_values=[values[wire.index] for wire in self.virtual_wires],
            circuit_digest=self.digest,
        )
        logger.debug("Proved circuit %d: public values %s", self.builder_id, proof.public_values)

        if not self.verify(proof):
            msg = f"The proof for circuit {self.builder_id} is rejected by its verifier."
            raise ProofGenerationError(msg)

        return proof

    def verify(self, proof: Proof) -> bool:
        """Check `proof` against the circuit.

        Returns `False` if the proof was computed for a different circuit, has the wrong number of public or witness
        values, contains values outside the field, or is rejected by the verifier script.
        """
        if proof.circuit_digest != self.digest:
            logger.warning("Proof rejected: circuit digest %s, expected %s", proof.circuit_digest, self.digest)
            return False
        if len(proof.public_values) != len(self.public_wires) or len(proof.witness_values) != len(self.virtual_wires):
            logger.warning(
                "Proof rejected: %d public values and %d witness values, expected %d and %d",
                len(proof.public_values),
                len(proof.witness_values),
                len(self.public_wires),
                len(self.virtual_wires),
            )
            return False
        if not all(0 <= value < self.config.modulus for value in [*proof.public_values, *proof.witness_values]):
            logger.warning("Proof rejected: values outside the field")
            return False

        context = Context(script=proof.to_unlocking_script() + self.verifier_script)
        if not context.evaluate(quiet=True):
            logger.warning("Proof rejected by the verifier script of circuit %d", self.builder_id)
            return False

        return True
