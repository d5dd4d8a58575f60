"""
Signing orchestration for Data Integrity Proofs.
"""

from __future__ import annotations

import logging

from vc_data_integrity.capabilities import Signer
from vc_data_integrity.options import ProofContext, resolve_proof_context
from vc_data_integrity.proof import Proof, decode_proofs

logger = logging.getLogger(__name__)


def add_data_integrity_proof(
    document: bytes,
    context: ProofContext,
    signer: Signer,
) -> list[Proof]:
    """Sign a serialized document and return the proofs it then carries.

    Performs:
    1. Default resolution of the context (created, proof purpose)
    2. signer.add_proof() with the complete proof options
    3. Decoding of the "proof" member of the signer's output

    The signer is not checked for None; a missing signer fails with
    AttributeError on first use.

    Args:
        document: The document in its serialized byte form.
        context: Proof parameters. Not modified.
        signer: The signing capability.

    Returns:
        Every proof found in the signed document, in document order. This
        includes proofs the document already carried.

    Raises:
        DecodeError: If the signer's output cannot be parsed.

        Exceptions raised by the signer propagate unchanged.
    """
    resolved = resolve_proof_context(context)
    options = resolved.to_proof_options()

    logger.debug(
        "Adding data integrity proof: suite=%s purpose=%s method=%s",
        options.suite_type,
        options.purpose,
        options.verification_method_id,
    )

    signed = signer.add_proof(document, options)

    proofs = decode_proofs(signed)
    if not proofs:
        logger.warning(
            "Signer returned a document without proofs (suite=%s, method=%s)",
            options.suite_type,
            options.verification_method_id,
        )

    return proofs
