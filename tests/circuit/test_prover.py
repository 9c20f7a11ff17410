import pytest

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.errors import WitnessError
from zkcontains.circuit.proof import Proof
from zkcontains.circuit.witness import PartialWitness
from zkcontains.config import GOLDILOCKS_MODULUS


def equality_circuit():
    builder = CircuitBuilder()
    x, y = builder.add_virtual_wires(2)
    flag = builder.is_equal(x, y)
    builder.register_public_input(builder.select(flag, builder.constant(1), builder.constant(0)))
    return builder.build(), x, y, flag


def test_unbound_input():
    data, x, _, _ = equality_circuit()
    witness = data.new_witness()
    witness.set_wire(x, 1)
    with pytest.raises(WitnessError, match=r"Input wires left unbound in the witness: \[1\]"):
        data.prove(witness)


def test_inconsistent_binding():
    witness = PartialWitness()
    data, x, _, _ = equality_circuit()
    witness.set_wire(x, 5)
    witness.set_wire(x, 5)
    with pytest.raises(WitnessError, match="Wire bound to two different values"):
        witness.set_wire(x, 6)


@pytest.mark.parametrize("value", [-1, GOLDILOCKS_MODULUS, GOLDILOCKS_MODULUS + 3])
def test_non_canonical_value(value):
    data, x, _, _ = equality_circuit()
    witness = data.new_witness()
    with pytest.raises(WitnessError, match="Witness value is not a canonical field element"):
        witness.set_wire(x, value)


def test_bound_derived_wire_must_match():
    data, x, y, flag = equality_circuit()
    witness = data.new_witness()
    witness.set_wires([x, y], [4, 4])
    witness.set_wire(flag, 0)
    with pytest.raises(WitnessError, match="Witness value disagrees with the circuit"):
        data.prove(witness)


def test_bound_derived_wire_consistent():
    data, x, y, flag = equality_circuit()
    witness = data.new_witness()
    witness.set_wires([x, y], [4, 4])
    witness.set_wire(flag, 1)
    assert data.prove(witness).public_values == [1]


def test_wire_from_another_circuit():
    data, x, y, _ = equality_circuit()
    other_data, other_x, _, _ = equality_circuit()
    witness = data.new_witness()
    witness.set_wires([x, y], [1, 2])
    witness.set_wire(other_x, 3)
    with pytest.raises(WitnessError, match="Witness binds a wire that does not belong to the circuit"):
        data.prove(witness)


def test_set_wires_length_mismatch():
    data, x, y, _ = equality_circuit()
    with pytest.raises(WitnessError, match="The number of wires and values must match"):
        data.new_witness().set_wires([x, y], [1])


def test_get_wire():
    data, x, y, _ = equality_circuit()
    witness = data.new_witness()
    witness.set_wire(x, 9)
    assert witness.get_wire(x) == 9
    assert x in witness
    assert y not in witness
    assert len(witness) == 1
    with pytest.raises(WitnessError, match="is not bound in the witness"):
        witness.get_wire(y)


@pytest.fixture
def proved_equality():
    data, x, y, _ = equality_circuit()
    witness = data.new_witness()
    witness.set_wires([x, y], [8, 9])
    return data, data.prove(witness)


def test_tampered_public_value(proved_equality):
    data, proof = proved_equality
    assert proof.public_values == [0]
    assert data.verify(proof)

    tampered = Proof([1], proof.witness_values, proof.circuit_digest)
    assert not data.verify(tampered)


def test_tampered_witness(proved_equality):
    data, proof = proved_equality
    tampered = Proof(proof.public_values, [9, 9], proof.circuit_digest)
    assert not data.verify(tampered)


@pytest.mark.parametrize(
    ("public_values", "witness_values"),
    [
        ([0, 0], [8, 9]),
        ([], [8, 9]),
        ([0], [8]),
        ([0], [8, 9, 10]),
        ([0], [8, GOLDILOCKS_MODULUS + 9]),
    ],
)
def test_structural_mismatch(proved_equality, public_values, witness_values):
    data, proof = proved_equality
    assert not data.verify(Proof(public_values, witness_values, proof.circuit_digest))


def test_proof_for_another_circuit(proved_equality):
    data, proof = proved_equality

    builder = CircuitBuilder()
    x, y = builder.add_virtual_wires(2)
    builder.register_public_input(builder.is_equal(x, y))
    other = builder.build()

    assert other.digest != data.digest
    assert not other.verify(proof)


def test_proof_size(proved_equality):
    _, proof = proved_equality
    # OP_0 OP_8 OP_9
    assert proof.to_bytes() == bytes.fromhex("005859")
    assert proof.size() == 3
