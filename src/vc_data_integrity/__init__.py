"""
VC Data Integrity - attach and verify Data Integrity Proofs.

Supports:
- Signing credentials and presentations through a pluggable Signer
- Verifying serialized documents through a pluggable Verifier
- Shared proof option defaults (created time, assertionMethod purpose)
- Single-object and array "proof" members
"""

from vc_data_integrity.capabilities import Signer, Verifier
from vc_data_integrity.document import Credential, Presentation, canonicalize_json
from vc_data_integrity.errors import (
    ConfigurationError,
    DataIntegrityError,
    DecodeError,
    SerializationError,
    SignerError,
    VerifierError,
)
from vc_data_integrity.options import (
    ASSERTION_METHOD,
    DATA_INTEGRITY_PROOF,
    ProofContext,
    ProofOptions,
    VerificationOptions,
    resolve_proof_context,
    resolve_verification_options,
)
from vc_data_integrity.proof import Proof, parse_ld_proof, proofs_to_raw
from vc_data_integrity.signing import add_data_integrity_proof
from vc_data_integrity.verification import verify_data_integrity_proof

__version__ = "0.1.0"

__all__ = [
    "ASSERTION_METHOD",
    "DATA_INTEGRITY_PROOF",
    "ConfigurationError",
    "Credential",
    "DataIntegrityError",
    "DecodeError",
    "Presentation",
    "Proof",
    "ProofContext",
    "ProofOptions",
    "SerializationError",
    "Signer",
    "SignerError",
    "VerificationOptions",
    "Verifier",
    "VerifierError",
    "add_data_integrity_proof",
    "canonicalize_json",
    "parse_ld_proof",
    "proofs_to_raw",
    "resolve_proof_context",
    "resolve_verification_options",
    "verify_data_integrity_proof",
]
