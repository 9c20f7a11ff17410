"""zkcontains: A Python package for proving that a text contains a pattern.

The `zkcontains` package compiles containment checks into arithmetic circuits over a prime field and proves the
claimed results. Two kinds of circuits are supported: exact substring containment, which matches every pattern at
every offset of a reference text, and approximate set membership, which publishes the answer of a bloom filter built
over a reference collection. Every query contributes one public value, the field one or the field zero.

Circuits are compiled into Bitcoin Script verifiers: a proof is the unlocking data of the verifier, and verifying a
proof evaluates it together with the verifier.

Usage example:
    Prove that "plonky2_example" contains "example":

    >>> from zkcontains.containment.circuits import SubstringContainmentCircuit
    >>>
    >>> circuit = SubstringContainmentCircuit(reference="plonky2_example", patterns=["example"])
    >>> proof = circuit.prove()
    >>> circuit.results(proof)
    [True]
    >>> circuit.verify(proof)
    True
"""
