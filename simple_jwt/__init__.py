"""SimpleJWT package.

Compact HMAC-signed claim tokens: ``base64url(header).base64url(claims).hex(hmac)``.
"""

from .claims import Payload, build_claims
from .config import EngineConfig
from .engine import TokenEngine, decode_token
from .errors import DecodeError, SerializationError, TokenError, TypeValidationError, UnsupportedAlgorithmError
from .signer import ALGORITHMS, Signer
from .types import DEFAULT_HEADER, DecodedToken

__all__ = [
    "TokenEngine",
    "decode_token",
    "Signer",
    "ALGORITHMS",
    "DEFAULT_HEADER",
    "DecodedToken",
    "Payload",
    "build_claims",
    "EngineConfig",
    "TokenError",
    "TypeValidationError",
    "UnsupportedAlgorithmError",
    "DecodeError",
    "SerializationError",
]
