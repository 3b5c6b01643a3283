"""Token datatypes and header constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

DEFAULT_ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"
SEGMENT_SEPARATOR = "."

DEFAULT_HEADER: Mapping[str, str] = MappingProxyType({"alg": DEFAULT_ALGORITHM, "typ": TOKEN_TYPE})


@dataclass(frozen=True)
class DecodedToken:
    header: Dict[str, Any] = field(default_factory=dict)
    claims: Dict[str, Any] = field(default_factory=dict)
    signature: str = ""

    @property
    def algorithm(self) -> Any:
        return self.header.get("alg", "")

    def as_dict(self) -> Dict[str, Any]:
        return {"header": dict(self.header), "claims": dict(self.claims), "signature": self.signature}
