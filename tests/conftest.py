"""Shared fixtures: ECDSA P-256 test suite and recording capabilities."""

from __future__ import annotations

import base64
import json
from datetime import datetime, timezone
from typing import Any

import pytest
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from vc_data_integrity import (
    DATA_INTEGRITY_PROOF,
    DecodeError,
    ProofOptions,
    SignerError,
    VerifierError,
    canonicalize_json,
    parse_ld_proof,
)

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_time(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime(TIME_FORMAT)


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def base64url_decode(data: str) -> bytes:
    """Decode base64url without padding."""
    padding = 4 - (len(data) % 4)
    if padding != 4:
        data += "=" * padding
    return base64.urlsafe_b64decode(data)


def signing_input(unsigned: dict[str, Any], proof_config: dict[str, Any]) -> bytes:
    """Bytes covered by the signature: the document without proofs plus the proof config."""
    return canonicalize_json({"document": unsigned, "proof": proof_config})


class EcdsaTestSigner:
    """Signs with ECDSA P-256 / SHA-256 and appends the proof to the document."""

    def __init__(self, private_key, supported_suites=("ecdsa-2019", "ecdsa-jcs-2022")):
        self.private_key = private_key
        self.supported_suites = set(supported_suites)

    def add_proof(self, document: bytes, options: ProofOptions) -> bytes:
        if options.proof_type != DATA_INTEGRITY_PROOF:
            raise SignerError(f"unsupported proof type: {options.proof_type}")
        if options.suite_type not in self.supported_suites:
            raise SignerError(f"unsupported cryptosuite: {options.suite_type}")

        doc = json.loads(document)

        proof: dict[str, Any] = {
            "type": options.proof_type,
            "cryptosuite": options.suite_type,
            "created": format_time(options.created),
            "verificationMethod": options.verification_method_id,
            "proofPurpose": options.purpose,
        }
        if options.expires is not None:
            proof["expires"] = format_time(options.expires)
        if options.domain:
            proof["domain"] = options.domain
        if options.challenge:
            proof["challenge"] = options.challenge

        unsigned = {k: v for k, v in doc.items() if k != "proof"}
        signature = self.private_key.sign(
            signing_input(unsigned, proof),
            ec.ECDSA(hashes.SHA256()),
        )
        proof["proofValue"] = base64url_encode(signature)

        existing = [p.to_dict() for p in parse_ld_proof(doc.get("proof"))]
        doc["proof"] = existing + [proof] if existing else proof

        return canonicalize_json(doc)


class EcdsaTestVerifier:
    """Verifies every proof of a document signed by EcdsaTestSigner."""

    def __init__(self, public_key):
        self.public_key = public_key

    def verify_proof(self, document: bytes, options: ProofOptions) -> None:
        try:
            doc = json.loads(document)
            proofs = parse_ld_proof(doc.get("proof"))
        except (ValueError, DecodeError) as e:
            raise VerifierError(f"malformed document: {e}") from e

        if not proofs:
            raise VerifierError("document carries no proof")

        unsigned = {k: v for k, v in doc.items() if k != "proof"}
        now = datetime.now(timezone.utc)

        for proof in proofs:
            if proof.type != options.proof_type:
                raise VerifierError(f"unsupported proof type: {proof.type}")
            if proof.proof_purpose != options.purpose:
                raise VerifierError(
                    f"proof purpose mismatch: {proof.proof_purpose} != {options.purpose}"
                )
            if options.domain and proof.domain != options.domain:
                raise VerifierError("domain mismatch")
            if options.challenge and proof.challenge != options.challenge:
                raise VerifierError("challenge mismatch")
            if proof.expires:
                expires = datetime.strptime(proof.expires, TIME_FORMAT).replace(
                    tzinfo=timezone.utc
                )
                if expires < now:
                    raise VerifierError("proof expired")

            config = proof.to_dict()
            signature = base64url_decode(config.pop("proofValue", ""))
            try:
                self.public_key.verify(
                    signature,
                    signing_input(unsigned, config),
                    ec.ECDSA(hashes.SHA256()),
                )
            except InvalidSignature as e:
                raise VerifierError("invalid signature") from e


class RecordingSigner:
    """Returns the input document with a fixed proof member, recording each call."""

    def __init__(self, proof: Any = None, output: bytes | None = None, error: Exception | None = None):
        self.proof = proof
        self.output = output
        self.error = error
        self.calls: list[tuple[bytes, ProofOptions]] = []

    def add_proof(self, document: bytes, options: ProofOptions) -> bytes:
        self.calls.append((document, options))
        if self.error is not None:
            raise self.error
        if self.output is not None:
            return self.output
        doc = json.loads(document)
        doc.pop("proof", None)
        if self.proof is not None:
            doc["proof"] = self.proof
        return json.dumps(doc).encode()


class RecordingVerifier:
    """Accepts everything unless given an error, recording each call."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[bytes, ProofOptions]] = []

    def verify_proof(self, document: bytes, options: ProofOptions) -> None:
        self.calls.append((document, options))
        if self.error is not None:
            raise self.error


@pytest.fixture
def ec_key_pair():
    """Generate a test EC P-256 key pair."""
    private_key = ec.generate_private_key(ec.SECP256R1())
    return private_key, private_key.public_key()


@pytest.fixture
def signer(ec_key_pair):
    private_key, _ = ec_key_pair
    return EcdsaTestSigner(private_key)


@pytest.fixture
def verifier(ec_key_pair):
    _, public_key = ec_key_pair
    return EcdsaTestVerifier(public_key)


@pytest.fixture
def credential_data():
    """An unsigned test credential."""
    return {
        "@context": ["https://www.w3.org/ns/credentials/v2"],
        "id": "urn:uuid:test-123",
        "type": ["VerifiableCredential"],
        "issuer": "did:web:example.com",
        "validFrom": "2025-01-01T00:00:00Z",
        "credentialSubject": {
            "id": "did:example:holder",
            "name": "Alice",
        },
    }


@pytest.fixture
def sample_proof():
    return {
        "type": "DataIntegrityProof",
        "cryptosuite": "ecdsa-jcs-2022",
        "created": "2025-01-15T10:00:00Z",
        "verificationMethod": "did:web:example.com#key-1",
        "proofPurpose": "assertionMethod",
        "proofValue": "z3FXQ",
    }
