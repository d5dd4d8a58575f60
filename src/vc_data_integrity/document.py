"""
Credential and presentation models.

Both serialize to the same byte form: compact JSON with sorted keys, UTF-8
encoded. That byte form is what signers and verifiers receive.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from vc_data_integrity import signing
from vc_data_integrity.capabilities import Signer
from vc_data_integrity.errors import DecodeError, SerializationError
from vc_data_integrity.options import ProofContext
from vc_data_integrity.proof import PROOF_FIELD, Proof, parse_ld_proof, proofs_to_raw

CREDENTIALS_V2_CONTEXT = "https://www.w3.org/ns/credentials/v2"
VERIFIABLE_PRESENTATION = "VerifiablePresentation"


def canonicalize_json(data: dict[str, Any], kind: str = "document") -> bytes:
    """Serialize a JSON object to its canonical byte form.

    Keys are sorted, no whitespace is emitted and non-ASCII text is kept as
    UTF-8.

    Args:
        data: The JSON object.
        kind: Document kind used in error messages.

    Returns:
        UTF-8 encoded canonical JSON.

    Raises:
        SerializationError: If data holds values JSON cannot represent
            (arbitrary objects, NaN, infinities, circular references).
    """
    try:
        text = json.dumps(
            data,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"serialize {kind}: {e}") from e
    return text.encode("utf-8")


def _load_object(data: bytes | str, kind: str) -> dict[str, Any]:
    try:
        parsed = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"parse {kind}: {e}") from e
    if not isinstance(parsed, dict):
        raise DecodeError(f"parse {kind}: expected JSON object, got {type(parsed).__name__}")
    return parsed


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


@dataclass
class Credential:
    """A verifiable credential.

    ``raw`` is the credential's JSON object and is what gets serialized.
    ``proofs`` is the parsed form of its "proof" member.
    """

    raw: dict[str, Any] = field(default_factory=dict)
    proofs: list[Proof] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credential:
        """Create a Credential from its JSON object.

        Raises:
            DecodeError: If the proof member is malformed.
        """
        raw = dict(data)
        return cls(raw=raw, proofs=parse_ld_proof(raw.get(PROOF_FIELD)))

    @classmethod
    def from_json(cls, data: bytes | str) -> Credential:
        """Parse a Credential from its serialized form."""
        return cls.from_dict(_load_object(data, "credential"))

    def to_json(self) -> bytes:
        """Serialize the credential to its canonical byte form."""
        return canonicalize_json(self.raw, "credential")

    @property
    def id(self) -> str | None:
        return self.raw.get("id")

    @property
    def types(self) -> list[str]:
        return _as_list(self.raw.get("type"))

    @property
    def issuer(self) -> str | None:
        """Issuer ID, whether the issuer is given as a string or an object."""
        issuer = self.raw.get("issuer")
        if isinstance(issuer, str):
            return issuer
        if isinstance(issuer, dict):
            return issuer.get("id")
        return None

    def add_data_integrity_proof(self, context: ProofContext, signer: Signer) -> None:
        """Sign the credential and attach the resulting proofs.

        ``proofs`` is replaced by what the signer returned. The "proof"
        member of ``raw`` is written only when at least one proof came back;
        with none, ``raw`` is left as it was.

        Nothing is modified when any step fails.

        Raises:
            SerializationError: If the credential cannot be serialized.
            DecodeError: If the signer's output cannot be parsed.

            Exceptions raised by the signer propagate unchanged.
        """
        try:
            data = self.to_json()
        except SerializationError as e:
            raise SerializationError(f"add data integrity proof to credential: {e}") from e

        proofs = signing.add_data_integrity_proof(data, context, signer)

        self.proofs = proofs

        if self.proofs:
            self.raw[PROOF_FIELD] = proofs_to_raw(self.proofs)


@dataclass
class Presentation:
    """A verifiable presentation.

    Unlike Credential there is no raw JSON mirror: the JSON object is built
    from the fields on every serialization.
    """

    context: list[Any] = field(default_factory=lambda: [CREDENTIALS_V2_CONTEXT])
    id: str | None = None
    types: list[str] = field(default_factory=lambda: [VERIFIABLE_PRESENTATION])
    holder: str | None = None
    credentials: list[Credential | Any] = field(default_factory=list)
    custom_fields: dict[str, Any] = field(default_factory=dict)
    proofs: list[Proof] = field(default_factory=list)
    # members loaded as a single value rather than an array
    scalar_members: set[str] = field(default_factory=set, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Presentation:
        """Create a Presentation from its JSON object.

        Embedded credentials given as objects become Credential instances;
        anything else (e.g. JWT strings) is kept as-is. Unknown members are
        kept in ``custom_fields``. to_dict() renders the members in the
        shape they were loaded in.

        Raises:
            DecodeError: If a proof member is malformed.
        """
        rest = dict(data)
        scalar_members = {
            key
            for key in ("@context", "type", "verifiableCredential")
            if key in rest and not isinstance(rest[key], list)
        }
        context = _as_list(rest.pop("@context", None))
        id_ = rest.pop("id", None)
        types = _as_list(rest.pop("type", None))
        holder = rest.pop("holder", None)
        credentials = [
            Credential.from_dict(c) if isinstance(c, dict) else c
            for c in _as_list(rest.pop("verifiableCredential", None))
        ]
        proofs = parse_ld_proof(rest.pop(PROOF_FIELD, None))

        return cls(
            context=context,
            id=id_,
            types=types,
            holder=holder,
            credentials=credentials,
            custom_fields=rest,
            proofs=proofs,
            scalar_members=scalar_members,
        )

    @classmethod
    def from_json(cls, data: bytes | str) -> Presentation:
        """Parse a Presentation from its serialized form."""
        return cls.from_dict(_load_object(data, "presentation"))

    def to_dict(self) -> dict[str, Any]:
        """Build the presentation's JSON object.

        Custom fields never override the standard members. Empty
        ``context``, ``types`` and ``credentials`` are omitted.
        """
        raw: dict[str, Any] = dict(self.custom_fields)
        for key in ("@context", "type", "verifiableCredential"):
            raw.pop(key, None)

        credentials = [c.raw if isinstance(c, Credential) else c for c in self.credentials]
        for key, values in (
            ("@context", self.context),
            ("type", self.types),
            ("verifiableCredential", credentials),
        ):
            if not values:
                continue
            if key in self.scalar_members and len(values) == 1:
                raw[key] = values[0]
            else:
                raw[key] = list(values)

        if self.id is not None:
            raw["id"] = self.id
        if self.holder is not None:
            raw["holder"] = self.holder
        if self.proofs:
            raw[PROOF_FIELD] = proofs_to_raw(self.proofs)
        return raw

    def to_json(self) -> bytes:
        """Serialize the presentation to its canonical byte form."""
        return canonicalize_json(self.to_dict(), "presentation")

    def add_data_integrity_proof(self, context: ProofContext, signer: Signer) -> None:
        """Sign the presentation and attach the resulting proofs.

        ``proofs`` is always replaced, even by an empty list.

        Nothing is modified when any step fails.

        Raises:
            SerializationError: If the presentation cannot be serialized.
            DecodeError: If the signer's output cannot be parsed.

            Exceptions raised by the signer propagate unchanged.
        """
        try:
            data = self.to_json()
        except SerializationError as e:
            raise SerializationError(f"add data integrity proof to presentation: {e}") from e

        self.proofs = signing.add_data_integrity_proof(data, context, signer)
