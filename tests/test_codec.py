import math

import pytest

from simple_jwt.codec import b64url_encode, canonical_json, decode_segment, encode_segment
from simple_jwt.errors import DecodeError, SerializationError

DEEPLY_NESTED = b64url_encode(b'{"a":' + b"[" * 100_000 + b"]" * 100_000 + b"}")


def test_encode_segment_is_compact_and_unpadded() -> None:
    assert canonical_json({"foo": "bar", "n": [1, 2]}) == '{"foo":"bar","n":[1,2]}'
    assert encode_segment({"foo": "bar"}) == "eyJmb28iOiJiYXIifQ"
    assert "=" not in encode_segment({"a": 1})


def test_key_order_is_preserved() -> None:
    assert canonical_json({"typ": "JWT", "alg": "HS256"}) == '{"typ":"JWT","alg":"HS256"}'


def test_segment_round_trip() -> None:
    claims = {"sub": "user-1", "roles": ["admin", "ops"], "meta": {"n": 1.5, "ok": True, "none": None}, "name": "café"}
    assert decode_segment(encode_segment(claims)) == claims


def test_decode_tolerates_padding() -> None:
    assert decode_segment("eyJmb28iOiJiYXIifQ==") == {"foo": "bar"}


def test_empty_segment_decodes_to_empty_mapping() -> None:
    assert decode_segment("") == {}


@pytest.mark.parametrize("value", [{"x": math.nan}, {"x": math.inf}, {"x": object()}, {"x": {1, 2}}])
def test_unserializable_values_raise(value) -> None:
    with pytest.raises(SerializationError):
        encode_segment(value)


def test_serialization_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        encode_segment({"x": math.nan})


@pytest.mark.parametrize(
    "segment",
    [
        "!!!!",
        "a",
        "ëyJ9",
        b64url_encode(b"not json"),
        b64url_encode(b"[1,2]"),
        b64url_encode(b'"text"'),
        b64url_encode(b"\xff\xfe{}"),
        pytest.param(DEEPLY_NESTED, id="deeply-nested"),
    ],
)
def test_corrupt_segments_raise_decode_error(segment: str) -> None:
    with pytest.raises(DecodeError):
        decode_segment(segment)


def test_deeply_nested_value_raises_serialization_error() -> None:
    nested: list = []
    for _ in range(100_000):
        nested = [nested]
    with pytest.raises(SerializationError):
        encode_segment({"x": nested})
