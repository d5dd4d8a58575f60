"""
Interfaces of the cryptographic capabilities this package orchestrates.

Implementations own the suite, key resolution and canonicalization. They
signal rejection by raising (preferably SignerError / VerifierError); any
exception they raise reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vc_data_integrity.options import ProofOptions


@runtime_checkable
class Signer(Protocol):
    """Adds a proof to a serialized document."""

    def add_proof(self, document: bytes, options: ProofOptions) -> bytes:
        """Return the document bytes with the new proof embedded under "proof"."""
        ...


@runtime_checkable
class Verifier(Protocol):
    """Checks the proofs embedded in a serialized document."""

    def verify_proof(self, document: bytes, options: ProofOptions) -> None:
        """Return None when the proofs verify, raise otherwise."""
        ...
