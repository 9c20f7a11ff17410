"""Errors raised by the constraint-system engine."""


class CircuitError(ValueError):
    """Base class for errors raised while building, proving or verifying a circuit."""


class WitnessError(CircuitError):
    """A wire is unbound, bound twice to different values, or bound outside the field."""


class ProofGenerationError(CircuitError):
    """The proof computed from a complete witness is rejected by the verifier script."""


class VerificationError(CircuitError):
    """A proof was rejected by the verifier."""
