"""Command-line entry point: ``python -m simple_jwt {encode,decode,verify}``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List

from .claims import Payload
from .config import SECRET_ENV, EngineConfig
from .engine import TokenEngine, decode_token
from .errors import TokenError
from .signer import ALGORITHMS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simple_jwt", description="Issue and verify HMAC-signed tokens.")
    parser.add_argument("--secret", help=f"signing secret (defaults to ${SECRET_ENV})")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), help="default signing algorithm")
    parser.add_argument("-v", "--verbose", action="store_true", help="log verification details to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="encode a JSON object of claims")
    encode.add_argument("claims", help="claims as a JSON object")
    encode.add_argument("--header", help="header overrides as a JSON object")
    encode.add_argument("--defaults", action="store_true", help="add generated jti and iat claims")

    decode = sub.add_parser("decode", help="print header, claims and signature without verifying")
    decode.add_argument("token")

    verify = sub.add_parser("verify", help="exit 0 if the token signature is valid, 1 otherwise")
    verify.add_argument("token")
    return parser


def _engine(args: argparse.Namespace) -> TokenEngine:
    config = EngineConfig.from_env(secret=args.secret)
    if args.algorithm:
        config = replace(config, default_algorithm=args.algorithm)
    return TokenEngine.from_config(config)


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "decode":
            decoded = decode_token(args.token)
            print(json.dumps(decoded.as_dict(), indent=2, sort_keys=True))
            return 0

        engine = _engine(args)
        if args.command == "verify":
            valid = engine.is_valid(args.token)
            print("valid" if valid else "invalid")
            return 0 if valid else 1

        claims = json.loads(args.claims)
        header = json.loads(args.header) if args.header else None
        if args.defaults and isinstance(claims, dict):
            claims = Payload(claims)
        print(engine.encode(claims, header))
        return 0
    except (TokenError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
