"""Containment circuits: exact substring containment and bloom-filter membership."""

import logging
from dataclasses import dataclass
from enum import Enum

from zkcontains.circuit.builder import CircuitBuilder
from zkcontains.circuit.circuit_data import CircuitData, CircuitStats
from zkcontains.circuit.errors import CircuitError, ProofGenerationError, VerificationError, WitnessError
from zkcontains.circuit.proof import Proof
from zkcontains.circuit.wires import BoolWire, Wire
from zkcontains.circuit.witness import PartialWitness
from zkcontains.config import CircuitConfig
from zkcontains.containment.aggregator import any_of
from zkcontains.containment.alignment import aligned_match, alignment_signals
from zkcontains.containment.bloom_filter import BloomFilter
from zkcontains.containment.result_encoder import decode_results, register_result
from zkcontains.containment.witness_assigner import assign_text
from zkcontains.fields.field_encoder import (
    add_text_wires,
    field_elements_to_bytes,
    string_to_field_elements,
    text_to_bytes,
)

logger = logging.getLogger(__name__)


class ProvingStatus(Enum):
    SUCCESS = "success"
    WITNESS_ERROR = "witness_error"
    VERIFICATION_ERROR = "verification_error"


@dataclass
class ContainmentOutcome:
    """Result of proving a containment circuit.

    Attributes:
        status (ProvingStatus): Whether a verified proof was produced, and if not, why.
        queries (list[bytes]): The queries, in submission order.
        results (list[bool] | None): One result per query, in submission order. `None` unless `status` is
            `SUCCESS`.
        proof (Proof | None): The verified proof. `None` unless `status` is `SUCCESS`.
        stats (CircuitStats | None): Statistics of the compiled circuit.
        error (CircuitError | None): The error that stopped proving, if any.
    """

    status: ProvingStatus
    queries: list[bytes]
    results: list[bool] | None = None
    proof: Proof | None = None
    stats: CircuitStats | None = None
    error: CircuitError | None = None

    @property
    def is_success(self) -> bool:
        return self.status == ProvingStatus.SUCCESS

    def raise_for_status(self) -> None:
        """Raise the error that stopped proving, if any."""
        if self.error is not None:
            raise self.error


class ContainmentCircuit:
    """Base class of containment circuits.

    Subclasses implement `_compile`, which adds the gates of the circuit to `self.builder`, binds the inputs in
    `self.witness` and registers one result per query with `register_result`. Results are the last public values of
    the circuit, in query order.

    Attributes:
        config (CircuitConfig): The configuration of the circuit.
        builder (CircuitBuilder): The builder owned by this circuit.
        witness (PartialWitness): The witness owned by this circuit.
        queries (list[bytes]): The queries, in submission order.
        data (CircuitData | None): The compiled circuit, once built.
    """

    def __init__(self, queries: list[str | bytes], config: CircuitConfig | None = None):
        self.config = config if config is not None else CircuitConfig.standard()
        self.builder = CircuitBuilder(self.config)
        self.witness = PartialWitness(self.config.modulus)
        self.queries = [text_to_bytes(query) for query in queries]
        self.data: CircuitData | None = None

    def _compile(self) -> None:
        raise NotImplementedError

    def build(self) -> CircuitData:
        """Compile the circuit. Subsequent calls return the same compiled circuit."""
        if self.data is None:
            self._compile()
            self.data = self.builder.build()
        return self.data

    def prove(self) -> Proof:
        """Build the circuit if needed and prove it with the bound witness.

        Raises:
            WitnessError: If the witness is incomplete or inconsistent.
            ProofGenerationError: If the proof is rejected by the verifier.
        """
        return self.build().prove(self.witness)

    def verify(self, proof: Proof) -> bool:
        return self.build().verify(proof)

    def results(self, proof: Proof) -> list[bool]:
        """Return the result of every query, in submission order, from the public values of `proof`."""
        n_queries = len(self.queries)
        return decode_results(proof.public_values[len(proof.public_values) - n_queries :])

    def run(self) -> ContainmentOutcome:
        """Build, prove and verify the circuit.

        Errors raised by the prover and rejections by the verifier are reported in the outcome rather than raised.
        """
        data = self.build()
        stats = data.stats

        try:
            proof = data.prove(self.witness)
        except WitnessError as e:
            logger.error("Witness error: %s", e)
            return ContainmentOutcome(ProvingStatus.WITNESS_ERROR, self.queries, stats=stats, error=e)
        except ProofGenerationError as e:
            logger.error("Proof generation error: %s", e)
            return ContainmentOutcome(ProvingStatus.VERIFICATION_ERROR, self.queries, stats=stats, error=e)

        if not data.verify(proof):
            error = VerificationError(f"The proof for circuit {data.builder_id} failed verification.")
            return ContainmentOutcome(ProvingStatus.VERIFICATION_ERROR, self.queries, stats=stats, error=error)

        return ContainmentOutcome(
            ProvingStatus.SUCCESS,
            self.queries,
            results=self.results(proof),
            proof=proof,
            stats=stats,
        )


class SubstringContainmentCircuit(ContainmentCircuit):
    """Circuit proving, for every pattern, whether it occurs as a contiguous substring of the reference.

    Every pattern is matched at every offset of the reference with `alignment_signals`, and the signals are
    aggregated with `any_of`. An empty pattern is contained in every reference; a pattern longer than the reference
    is contained in none.

    If `config.expose_texts` is set, the wires of the reference and then of every pattern are registered as public
    values ahead of the results.

    Attributes:
        reference (bytes): The reference text.
        reference_wires (list[Wire]): The input wires of the reference.
        pattern_wires (list[list[Wire]]): The input wires of every pattern.
    """

    def __init__(self, reference: str | bytes, patterns: list[str | bytes], config: CircuitConfig | None = None):
        super().__init__(patterns, config)
        self.reference = text_to_bytes(reference)
        self.reference_wires: list[Wire] = []
        self.pattern_wires: list[list[Wire]] = []

    def _compile(self) -> None:
        modulus = self.config.modulus

        reference_elements = string_to_field_elements(self.reference, modulus)
        self.reference_wires = add_text_wires(self.builder, len(reference_elements))
        assign_text(self.witness, self.reference_wires, reference_elements)

        for pattern in self.queries:
            pattern_elements = string_to_field_elements(pattern, modulus)
            wires = add_text_wires(self.builder, len(pattern_elements))
            assign_text(self.witness, wires, pattern_elements)
            self.pattern_wires.append(wires)

        if self.config.expose_texts:
            self.builder.register_public_inputs(self.reference_wires)
            for wires in self.pattern_wires:
                self.builder.register_public_inputs(wires)

        for wires in self.pattern_wires:
            signals = alignment_signals(self.builder, self.reference_wires, wires)
            register_result(self.builder, any_of(self.builder, signals))

        logger.debug(
            "Compiled substring containment of %d patterns in a reference of %d bytes",
            len(self.queries),
            len(self.reference),
        )


class BloomMembershipCircuit(ContainmentCircuit):
    """Circuit publishing, for every query, whether the reference collection possibly contains it.

    The bloom filter is evaluated outside the circuit and its answer is injected as a constant boolean: the proof
    attests to the published values, not to the filter lookup. If `config.confirm_matches` is set, every query the
    filter accepts is also compared in-circuit against every reference element of the same length, and its result is
    the filter answer AND the disjunction of those comparisons.

    Attributes:
        references (list[bytes]): The reference collection.
        sketch (BloomFilter): The filter built over the reference collection, sized from its total byte length.
        reference_wires (list[list[Wire]] | None): The input wires of the references, allocated on the first
            confirmed query.
    """

    def __init__(self, references: list[str | bytes], queries: list[str | bytes], config: CircuitConfig | None = None):
        super().__init__(queries, config)
        self.references = [text_to_bytes(reference) for reference in references]
        self.reference_wires: list[list[Wire]] | None = None

        total_length = sum(len(reference) for reference in self.references)
        self.sketch = BloomFilter.with_rate(self.config.false_positive_rate, max(total_length, 1))
        for reference in self.references:
            self.sketch.insert(self._canonical_bytes(reference))

    def _canonical_bytes(self, text: bytes) -> bytes:
        return field_elements_to_bytes(string_to_field_elements(text, self.config.modulus), self.config.modulus)

    def prefilter(self) -> list[bool]:
        """Return the answer of the bloom filter for every query, in submission order."""
        return [self._canonical_bytes(query) in self.sketch for query in self.queries]

    def _confirm(self, query: bytes) -> BoolWire:
        modulus = self.config.modulus
        if self.reference_wires is None:
            self.reference_wires = []
            for reference in self.references:
                elements = string_to_field_elements(reference, modulus)
                wires = add_text_wires(self.builder, len(elements))
                assign_text(self.witness, wires, elements)
                self.reference_wires.append(wires)

        query_elements = string_to_field_elements(query, modulus)
        query_wires = add_text_wires(self.builder, len(query_elements))
        assign_text(self.witness, query_wires, query_elements)

        signals = [
            aligned_match(self.builder, wires, query_wires, 0)
            for wires in self.reference_wires
            if len(wires) == len(query_wires)
        ]
        return any_of(self.builder, signals)

    def _compile(self) -> None:
        for query, possibly_contained in zip(self.queries, self.prefilter()):
            contains_flag = self.builder.true() if possibly_contained else self.builder.false()
            if self.config.confirm_matches and possibly_contained:
                contains_flag = self.builder.and_(contains_flag, self._confirm(query))
            register_result(self.builder, contains_flag)

        logger.debug(
            "Compiled bloom membership of %d queries against %d references (%d bits, %d hashes)",
            len(self.queries),
            len(self.references),
            self.sketch.num_bits,
            self.sketch.num_hashes,
        )
