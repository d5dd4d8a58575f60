"""
Proof entries embedded in credentials and presentations.

The "proof" member of a document holds either a single proof object or an
ordered array of them. parse_ld_proof() accepts both shapes and
proofs_to_raw() renders them back the same way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from vc_data_integrity.errors import DecodeError

PROOF_FIELD = "proof"

# JSON member name -> attribute name
_KNOWN_MEMBERS = {
    "id": "id",
    "type": "type",
    "cryptosuite": "cryptosuite",
    "proofPurpose": "proof_purpose",
    "verificationMethod": "verification_method",
    "created": "created",
    "expires": "expires",
    "domain": "domain",
    "challenge": "challenge",
    "proofValue": "proof_value",
}


@dataclass
class Proof:
    """One proof entry of a document.

    Timestamps are kept as the strings found in the document. Members not
    listed as attributes are preserved in ``extra``.
    """

    type: str | None = None
    cryptosuite: str | None = None
    proof_purpose: str | None = None
    verification_method: str | None = None
    created: str | None = None
    expires: str | None = None
    domain: str | None = None
    challenge: str | None = None
    proof_value: str | None = None
    id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Proof:
        """Create a Proof from its JSON object."""
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            if key in _KNOWN_MEMBERS:
                known[_KNOWN_MEMBERS[key]] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Render the proof as a JSON object, omitting unset members."""
        data: dict[str, Any] = {}
        for key, attr in _KNOWN_MEMBERS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        data.update(self.extra)
        return data


def parse_ld_proof(raw: Any) -> list[Proof]:
    """Parse the raw "proof" member of a document.

    Args:
        raw: A proof object, an array of proof objects, or None when the
            document carries no proof.

    Returns:
        The proofs in document order. Empty when raw is None.

    Raises:
        DecodeError: If raw is neither an object nor an array of objects.
    """
    if raw is None:
        return []

    if isinstance(raw, dict):
        return [Proof.from_dict(raw)]

    if isinstance(raw, list):
        proofs: list[Proof] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise DecodeError(
                    f"proof at index {index} is {type(item).__name__}, expected object"
                )
            proofs.append(Proof.from_dict(item))
        return proofs

    raise DecodeError(f"unsupported proof shape: {type(raw).__name__}")


def proofs_to_raw(proofs: list[Proof]) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Render proofs for the "proof" member: None, one object, or an array."""
    if not proofs:
        return None
    if len(proofs) == 1:
        return proofs[0].to_dict()
    return [p.to_dict() for p in proofs]


def decode_proofs(document: bytes) -> list[Proof]:
    """Extract the proofs from a serialized document.

    Raises:
        DecodeError: If the bytes are not a JSON object or its proof member
            is malformed.
    """
    try:
        data = json.loads(document)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"signed document is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"signed document is {type(data).__name__}, expected JSON object"
        )

    return parse_ld_proof(data.get(PROOF_FIELD))
