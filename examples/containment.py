import argparse
import json
import logging
import random
import string
from pathlib import Path

from zkcontains.circuit.circuit_data import CircuitStats
from zkcontains.config import CircuitConfig
from zkcontains.containment.circuits import (
    BloomMembershipCircuit,
    ContainmentOutcome,
    SubstringContainmentCircuit,
)

REFERENCE_COLLECTION = [
    "plonky2_example",
    "zero_knowledge",
    "rust_programming",
    "zk_snarks",
    "plonk_proof",
    "hash_functions",
    "cryptography",
    "merkle_tree",
    "circuit_builder",
    "poseidon_hash",
]

QUERIES = [
    "example",
    "proof",
    "zk",
    "snarks",
    "hash",
    "tree",
    "builder",
    "rust",
    "zero",
    "functions",
    "cryptography",
    "merkle_tree",
]


def print_outcome(outcome: ContainmentOutcome, question: str) -> None:
    outcome.raise_for_status()
    for query, result in zip(outcome.queries, outcome.results):
        print(f"{question} '{query.decode()}'? {'Yes' if result else 'No'}")
    print_stats(outcome.stats)
    print(f"Proof size: {outcome.proof.size()} bytes")


def print_stats(stats: CircuitStats) -> None:
    print(
        f"Circuit: {stats.num_wires} wires, {stats.num_inputs} inputs, {stats.num_gates} gates "
        f"({stats.num_constants} constants), {stats.num_public_values} public values, "
        f"degree_bits {stats.degree_bits}, verifier size {stats.script_size} bytes"
    )


def length_sweep(lengths: list[int], pattern_length: int, config: CircuitConfig, seed: int) -> list[dict]:
    """Build and prove an independent substring circuit for every reference length."""
    rng = random.Random(seed)
    rows = []
    for length in lengths:
        reference = "".join(rng.choices(string.ascii_lowercase, k=length))
        start = rng.randrange(max(length - pattern_length, 0) + 1)
        pattern = reference[start : start + pattern_length]

        outcome = SubstringContainmentCircuit(reference, [pattern], config).run()
        outcome.raise_for_status()
        rows.append(
            {
                "reference_length": length,
                "pattern_length": len(pattern),
                "num_gates": outcome.stats.num_gates,
                "degree_bits": outcome.stats.degree_bits,
                "script_size": outcome.stats.script_size,
                "proof_size": outcome.proof.size(),
            }
        )
    return rows


parser = argparse.ArgumentParser(
    description="Prove that a reference text contains patterns, or that a reference collection possibly contains \
        queries, and print the results together with circuit statistics."
)
parser.add_argument("--config", type=str, help="TOML file with a [circuit] table", required=False)
parser.add_argument("--verbose", action="store_true", help="Log circuit construction and proving")
subparsers = parser.add_subparsers(dest="command", required=True)

substring_parser = subparsers.add_parser("substring", help="Exact substring containment")
substring_parser.add_argument("--reference", type=str, default="plonky2_example")
substring_parser.add_argument("--patterns", type=str, nargs="+", default=["example", "example1", "zzz"])

bloom_parser = subparsers.add_parser("bloom", help="Bloom filter membership")
bloom_parser.add_argument("--references", type=str, nargs="+", default=REFERENCE_COLLECTION)
bloom_parser.add_argument("--queries", type=str, nargs="+", default=QUERIES)

sweep_parser = subparsers.add_parser("sweep", help="Circuit and proof sizes over increasing reference lengths")
sweep_parser.add_argument("--lengths", type=int, nargs="+", default=[16, 32, 64, 128])
sweep_parser.add_argument("--pattern-length", type=int, default=8)
sweep_parser.add_argument("--seed", type=int, default=0)
sweep_parser.add_argument("--output", type=str, help="JSON file to write the measurements to", required=False)

if __name__ == "__main__":
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = CircuitConfig.from_toml(Path(args.config)) if args.config is not None else CircuitConfig.standard()

    match args.command:
        case "substring":
            outcome = SubstringContainmentCircuit(args.reference, args.patterns, config).run()
            print_outcome(outcome, f"Does '{args.reference}' contain")
        case "bloom":
            outcome = BloomMembershipCircuit(args.references, args.queries, config).run()
            print_outcome(outcome, "Does the reference collection likely contain")
        case "sweep":
            rows = length_sweep(args.lengths, args.pattern_length, config, args.seed)
            for row in rows:
                print(json.dumps(row))
            if args.output is not None:
                with Path.open(Path(args.output), "w") as f:
                    f.write(json.dumps(rows))
