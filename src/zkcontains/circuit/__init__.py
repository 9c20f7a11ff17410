"""circuit package.

This package provides the constraint-system engine on which containment circuits are built. A circuit is a list of
gates over wires holding field elements. Finalising a circuit compiles it into a Bitcoin Script verifier: the
unlocking script pushes the claimed public values and the witness, the locking script recomputes every gate and
checks the public values.

Modules:
    - builder: Contains the CircuitBuilder class, used to allocate wires and add gates.
    - circuit_data: Contains the CircuitData class, the compiled circuit able to prove and verify, and CircuitStats.
    - gates: Contains the Gate class and the GateType enumeration.
    - proof: Contains the Proof class.
    - witness: Contains the PartialWitness class.
    - wires: Contains the Wire and BoolWire classes.
    - errors: Contains the errors raised while proving and verifying.

Usage example:
    >>> from zkcontains.circuit.builder import CircuitBuilder
    >>> builder = CircuitBuilder()
    >>> x, y = builder.add_virtual_wires(2)
    >>> builder.register_public_input(builder.select(builder.is_equal(x, y), builder.constant(1), builder.constant(0)))
    >>> data = builder.build()
    >>> witness = data.new_witness()
    >>> witness.set_wires([x, y], [7, 7])
    >>> proof = data.prove(witness)
    >>> proof.public_values
    [1]
    >>> data.verify(proof)
    True
"""
