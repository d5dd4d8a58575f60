"""
Verification orchestration for Data Integrity Proofs.
"""

from __future__ import annotations

import logging

from vc_data_integrity.errors import ConfigurationError
from vc_data_integrity.options import VerificationOptions, resolve_verification_options

logger = logging.getLogger(__name__)


def verify_data_integrity_proof(
    document: bytes,
    options: VerificationOptions | None,
) -> None:
    """Verify the Data Integrity Proofs embedded in a serialized document.

    Args:
        document: The signed document in its serialized byte form.
        options: Verifier and expected purpose, domain and challenge. An
            empty purpose means assertionMethod; empty domain and challenge
            are not constrained.

    Raises:
        ConfigurationError: If no verifier is supplied. Raised before any
            verification is attempted, whatever the document contains.

        Exceptions raised by the verifier propagate unchanged.
    """
    if options is None or options.verifier is None:
        raise ConfigurationError("data integrity proof needs data integrity verifier")

    resolved = resolve_verification_options(options)
    proof_options = resolved.to_proof_options()

    logger.debug(
        "Verifying data integrity proof: purpose=%s domain=%r challenge=%r",
        proof_options.purpose,
        proof_options.domain,
        proof_options.challenge,
    )

    resolved.verifier.verify_proof(document, proof_options)
