import json

import pytest

from simple_jwt.cli import main

TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJmb28iOiJiYXIifQ"
    ".76dc5633a308720a1e3201fceed1afb0d0d8e9c1d62fa3065b82de62f9e6d490"
)


def test_encode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--secret", "secret", "encode", '{"foo":"bar"}']) == 0
    assert capsys.readouterr().out.strip() == TOKEN


def test_encode_with_defaults_and_header(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--secret", "secret", "encode", '{"sub":"u1"}', "--defaults", "--header", '{"alg":"HS384"}']) == 0
    token = capsys.readouterr().out.strip()
    assert main(["--secret", "secret", "decode", token]) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert decoded["header"]["alg"] == "HS384"
    assert {"sub", "jti", "iat"} <= set(decoded["claims"])


def test_decode_needs_no_secret(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SIMPLE_JWT_SECRET", raising=False)
    assert main(["decode", TOKEN]) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert decoded["claims"] == {"foo": "bar"}
    assert decoded["signature"] == TOKEN.rsplit(".", 1)[1]


def test_verify_exit_codes(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIMPLE_JWT_SECRET", "secret")
    assert main(["verify", TOKEN]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert main(["--secret", "wrong", "verify", TOKEN]) == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_errors_exit_2(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SIMPLE_JWT_SECRET", raising=False)
    assert main(["verify", TOKEN]) == 2
    assert "SIMPLE_JWT_SECRET" in capsys.readouterr().err
    assert main(["--secret", "s", "encode", '{"foo":"bar"}', "--header", '{"alg":"none"}']) == 2
    assert main(["--secret", "s", "encode", "[1, 2]"]) == 2
    assert main(["--secret", "s", "encode", "{not json"]) == 2
    assert main(["decode", "%%%%.e30.x"]) == 2
