"""
Exception types raised while attaching or verifying Data Integrity Proofs.

Signer and verifier implementations raise SignerError / VerifierError; the
orchestrators in this package re-raise whatever the capability raised without
wrapping it, so callers can tell a capability failure apart from a
DecodeError (contract mismatch) or a ConfigurationError (caller mistake).
"""

from __future__ import annotations


class DataIntegrityError(Exception):
    """Base class for all Data Integrity Proof errors."""


class ConfigurationError(DataIntegrityError):
    """Raised when verification is requested without a verifier."""


class SerializationError(DataIntegrityError):
    """Raised when a document cannot be rendered to its byte form."""


class SignerError(DataIntegrityError):
    """Raised by a signer that rejects a proof request."""


class VerifierError(DataIntegrityError):
    """Raised by a verifier when a proof does not verify."""


class DecodeError(DataIntegrityError):
    """Raised when signed output or a document cannot be parsed."""
