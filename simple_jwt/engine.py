"""Token engine: encode, decode and verify signed claim tokens."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping

from .codec import decode_segment, encode_segment
from .errors import DecodeError, TypeValidationError, UnsupportedAlgorithmError
from .signer import Signer, resolve_algorithm
from .types import DEFAULT_ALGORITHM, DEFAULT_HEADER, SEGMENT_SEPARATOR, DecodedToken

if TYPE_CHECKING:
    from .config import EngineConfig

logger = logging.getLogger(__name__)


def decode_token(token: str) -> DecodedToken:
    """Split a token and decode its header and claims without verifying it.

    Missing or empty segments decode to empty mappings; segments that are
    present but corrupt raise :class:`DecodeError`.
    """
    if not isinstance(token, str):
        raise TypeValidationError.expected("decode_token", "token", "string", token)

    parts = token.split(SEGMENT_SEPARATOR)
    encoded_header = parts[0]
    encoded_payload = parts[1] if len(parts) > 1 else ""
    signature = parts[2] if len(parts) > 2 else ""
    return DecodedToken(
        header=decode_segment(encoded_header),
        claims=decode_segment(encoded_payload),
        signature=signature,
    )


class TokenEngine:
    """Issue and verify HMAC-signed tokens for one shared secret.

    Instances hold no mutable state after construction, so one engine can be
    shared across threads.
    """

    def __init__(self, secret: str | bytes, *, default_algorithm: str = DEFAULT_ALGORITHM) -> None:
        if not isinstance(secret, (str, bytes)):
            raise TypeValidationError.expected(type(self).__name__, "secret", "string", secret)
        resolve_algorithm(default_algorithm)
        self._signer = Signer(secret)
        self.default_algorithm = default_algorithm

    @classmethod
    def from_config(cls, config: "EngineConfig") -> "TokenEngine":
        return cls(config.secret, default_algorithm=config.default_algorithm)

    def encode(self, payload: Mapping[str, Any], header: Mapping[str, Any] | None = None) -> str:
        """Return ``header.payload.signature`` for the given claims."""
        where = f"{type(self).__name__}.encode"
        if not isinstance(payload, Mapping):
            raise TypeValidationError.expected(where, "payload", "mapping", payload)
        if header is not None and not isinstance(header, Mapping):
            raise TypeValidationError.expected(where, "header", "mapping", header)

        merged_header: Dict[str, Any] = {**DEFAULT_HEADER, "alg": self.default_algorithm, **(header or {})}
        resolve_algorithm(merged_header["alg"])
        encoded_header = encode_segment(merged_header)
        encoded_payload = encode_segment(dict(payload))
        signature = self._signer.sign(merged_header["alg"], encoded_header, encoded_payload)
        return SEGMENT_SEPARATOR.join((encoded_header, encoded_payload, signature))

    def decode(self, token: str) -> DecodedToken:
        """Decode without verifying; see :func:`decode_token`."""
        if not isinstance(token, str):
            raise TypeValidationError.expected(f"{type(self).__name__}.decode", "token", "string", token)
        return decode_token(token)

    def is_valid(self, token: str) -> bool:
        """Return True only if the token's signature matches its exact segments."""
        if not isinstance(token, str):
            raise TypeValidationError.expected(f"{type(self).__name__}.is_valid", "token", "string", token)

        parts = token.split(SEGMENT_SEPARATOR)
        if len(parts) != 3:
            logger.debug("Token rejected: expected 3 segments, got %d", len(parts))
            return False

        encoded_header, encoded_payload, _ = parts
        try:
            decoded = decode_token(token)
            algorithm = decoded.algorithm
            if not isinstance(algorithm, str):
                algorithm = ""
            valid = self._signer.verify(algorithm, encoded_header, encoded_payload, decoded.signature)
        except (DecodeError, UnsupportedAlgorithmError) as exc:
            logger.debug("Token rejected: %s", exc)
            return False

        if not valid:
            logger.debug("Token rejected: signature mismatch")
        return valid

    def sign(self, algorithm: str, encoded_header: str, encoded_payload: str) -> str:
        """Return the lowercase hex HMAC of ``encoded_header.encoded_payload``."""
        return self._signer.sign(algorithm, encoded_header, encoded_payload)
