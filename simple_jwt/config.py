"""Configuration model for token engines."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .types import DEFAULT_ALGORITHM

SECRET_ENV = "SIMPLE_JWT_SECRET"
ALGORITHM_ENV = "SIMPLE_JWT_ALGORITHM"


@dataclass(frozen=True)
class EngineConfig:
    """Secret and default signing algorithm for a :class:`TokenEngine`."""

    secret: str
    default_algorithm: str = DEFAULT_ALGORITHM

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, *, secret: str | None = None) -> "EngineConfig":
        """Load settings from ``SIMPLE_JWT_*`` variables; explicit ``secret`` wins."""
        env = os.environ if environ is None else environ
        resolved = secret or env.get(SECRET_ENV)
        if not resolved:
            raise ValueError(f"A signing secret is required. Pass one explicitly or set {SECRET_ENV}.")
        return cls(secret=resolved, default_algorithm=env.get(ALGORITHM_ENV, DEFAULT_ALGORITHM))
