"""
Proof options and their default resolution.

Signing and verification share the same purpose default, so a proof signed
without an explicit purpose verifies without the caller knowing the default.
Resolution returns new objects and never mutates the caller's options.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vc_data_integrity.capabilities import Verifier

ASSERTION_METHOD = "assertionMethod"
DATA_INTEGRITY_PROOF = "DataIntegrityProof"


@dataclass(frozen=True)
class ProofOptions:
    """Options handed to a Signer or Verifier.

    An empty string means "not specified" and a None timestamp means unset
    (for expires: the proof does not expire).
    """

    purpose: str
    proof_type: str = DATA_INTEGRITY_PROOF
    verification_method_id: str = ""
    suite_type: str = ""
    domain: str = ""
    challenge: str = ""
    created: datetime | None = None
    expires: datetime | None = None


@dataclass
class ProofContext:
    """Parameters for creating a Data Integrity Proof."""

    signing_key_id: str = ""  # e.g. did:foo:bar#key-1
    proof_purpose: str = ""  # defaults to assertionMethod
    crypto_suite: str = ""  # e.g. ecdsa-2019
    created: datetime | None = None
    expires: datetime | None = None
    domain: str = ""
    challenge: str = ""

    def to_proof_options(self) -> ProofOptions:
        """Build signer options from this context as-is.

        Call resolve_proof_context() first to apply defaults.
        """
        return ProofOptions(
            purpose=self.proof_purpose,
            proof_type=DATA_INTEGRITY_PROOF,
            verification_method_id=self.signing_key_id,
            suite_type=self.crypto_suite,
            domain=self.domain,
            challenge=self.challenge,
            created=self.created,
            expires=self.expires,
        )


@dataclass
class VerificationOptions:
    """Parameters for checking a Data Integrity Proof."""

    verifier: Verifier | None = None
    purpose: str = ""
    domain: str = ""
    challenge: str = ""

    def to_proof_options(self) -> ProofOptions:
        """Build verifier options.

        Key id, suite and timestamps are left out: the verifier reads them
        from the embedded proof.
        """
        return ProofOptions(
            purpose=self.purpose,
            proof_type=DATA_INTEGRITY_PROOF,
            domain=self.domain,
            challenge=self.challenge,
        )


def resolve_purpose(purpose: str) -> str:
    """Return the proof purpose, or assertionMethod when it is empty."""
    return purpose or ASSERTION_METHOD


def resolve_proof_context(
    context: ProofContext,
    now: datetime | None = None,
) -> ProofContext:
    """Return a fully-defaulted copy of a proof context.

    Args:
        context: The caller's context. It is not modified.
        now: Timestamp used when created is absent. Defaults to the current
            UTC time at the moment of the call.

    Returns:
        A new ProofContext with created and proof_purpose filled in.
        expires is left as given; an absent expiry is never inferred.
    """
    created = context.created
    if created is None:
        created = now if now is not None else datetime.now(timezone.utc)

    return replace(
        context,
        created=created,
        proof_purpose=resolve_purpose(context.proof_purpose),
    )


def resolve_verification_options(options: VerificationOptions) -> VerificationOptions:
    """Return a copy of the options with the proof purpose defaulted."""
    return replace(options, purpose=resolve_purpose(options.purpose))
