"""containment package.

This package compiles containment checks into circuits.

Modules:
    - alignment: Compiles, for every offset of a pattern in a reference, the conjunction of per-position equality
    tests.
    - aggregator: Combines match signals with a disjunction.
    - bloom_filter: Contains the BloomFilter class used to pre-screen membership queries.
    - result_encoder: Registers boolean results as public field values and decodes them.
    - witness_assigner: Binds encoded texts to their input wires.
    - circuits: Contains the SubstringContainmentCircuit and BloomMembershipCircuit classes, which tie the modules
    above together, and the ContainmentOutcome returned by `run`.

Usage example:
    >>> from zkcontains.containment.circuits import SubstringContainmentCircuit
    >>> circuit = SubstringContainmentCircuit(reference="plonky2_example", patterns=["example", "zzz"])
    >>> outcome = circuit.run()
    >>> outcome.results
    [True, False]
"""
