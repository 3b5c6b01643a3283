"""Exception hierarchy for token encoding, decoding and verification."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for all token errors."""


class TypeValidationError(TokenError, TypeError):
    """A public entry point received an argument of the wrong kind."""

    @classmethod
    def expected(cls, where: str, name: str, expected: str, value: object) -> "TypeValidationError":
        return cls(f'{where}: expects parameter "{name}" to be of type {expected}: "{type(value).__name__}" given')


class UnsupportedAlgorithmError(TokenError, ValueError):
    """Algorithm identifier is outside the HMAC allow-list."""

    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported algorithm {algorithm!r}.")


class DecodeError(TokenError, ValueError):
    """A token segment is not valid base64url or JSON object text."""


class SerializationError(TokenError, ValueError):
    """A mapping holds values that cannot be represented as JSON."""
