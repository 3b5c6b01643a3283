"""HMAC signing of encoded token segments."""

from __future__ import annotations

import hashlib
import hmac
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import TypeValidationError, UnsupportedAlgorithmError

HashFactory = Callable[..., Any]

ALGORITHMS: Mapping[str, HashFactory] = MappingProxyType(
    {
        "HS256": hashlib.sha256,
        "HS384": hashlib.sha384,
        "HS512": hashlib.sha512,
    }
)


def resolve_algorithm(algorithm: object) -> HashFactory:
    """Return the hash constructor for an allow-listed algorithm id."""
    if not isinstance(algorithm, str) or algorithm not in ALGORITHMS:
        raise UnsupportedAlgorithmError(algorithm)
    return ALGORITHMS[algorithm]


def signing_input(encoded_header: str, encoded_payload: str) -> bytes:
    return f"{encoded_header}.{encoded_payload}".encode("utf-8")


class Signer:
    """Compute hex HMAC signatures keyed by one secret."""

    def __init__(self, secret: str | bytes) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        elif not isinstance(secret, bytes):
            raise TypeValidationError.expected(type(self).__name__, "secret", "string", secret)
        self._secret = secret

    def sign(self, algorithm: str, encoded_header: str, encoded_payload: str) -> str:
        where = f"{type(self).__name__}.sign"
        for name, value in (
            ("algorithm", algorithm),
            ("encoded_header", encoded_header),
            ("encoded_payload", encoded_payload),
        ):
            if not isinstance(value, str):
                raise TypeValidationError.expected(where, name, "string", value)

        digestmod = resolve_algorithm(algorithm)
        return hmac.new(self._secret, signing_input(encoded_header, encoded_payload), digestmod).hexdigest()

    def verify(self, algorithm: str, encoded_header: str, encoded_payload: str, signature: str) -> bool:
        """Recompute the signature and compare it in constant time."""
        expected = self.sign(algorithm, encoded_header, encoded_payload)
        if not isinstance(signature, str):
            raise TypeValidationError.expected(f"{type(self).__name__}.verify", "signature", "string", signature)
        # expected is hex; non-ASCII text never matches.
        if not signature.isascii():
            return False
        return hmac.compare_digest(expected, signature)
