"""Claims builder with registered claim names and default claims."""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Mapping

from .codec import canonical_json

ISSUER = "iss"
SUBJECT = "sub"
AUDIENCE = "aud"
EXPIRATION_TIME = "exp"
NOT_BEFORE = "nbf"
ISSUED_AT = "iat"
JWT_ID = "jti"

RESERVED_CLAIMS = frozenset({ISSUER, SUBJECT, AUDIENCE, EXPIRATION_TIME, NOT_BEFORE, ISSUED_AT, JWT_ID})

JWT_ID_LENGTH = 12


def new_jwt_id(length: int = JWT_ID_LENGTH) -> str:
    """Return a random lowercase hex identifier."""
    return "".join(secrets.choice("0123456789abcdef") for _ in range(length))


class Payload(Mapping[str, Any]):
    """Read-only claims set pre-populated with ``jti`` and ``iat``.

    Caller-supplied claims override the generated defaults.
    """

    def __init__(self, claims: Mapping[str, Any] | None = None, *, now: datetime | None = None) -> None:
        issued_at = int((now or datetime.now(timezone.utc)).timestamp())
        self._claims: Dict[str, Any] = {
            JWT_ID: new_jwt_id(),
            ISSUED_AT: issued_at,
            **(claims or {}),
        }

    def __getitem__(self, key: str) -> Any:
        return self._claims[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"Payload({self._claims!r})"

    def __str__(self) -> str:
        return canonical_json(self._claims)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._claims)


def build_claims(**claims: Any) -> Dict[str, Any]:
    """Shortcut for ``Payload(claims).to_dict()``."""
    return Payload(claims).to_dict()
