from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from flask import Flask

from roomgate.application.use_cases.credentials.issue_token import (
    IssueTokenInput, IssueTokenUseCase, is_moderator)
from roomgate.shared.config.settings import CredentialsConfig

from .conftest import FixedClock


@pytest.fixture(scope="module")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="module")
def private_pem(rsa_key: rsa.RSAPrivateKey) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def _credentials(private_pem: str, **extra) -> CredentialsConfig:
    return CredentialsConfig(app_id="vpaas-magic/abc123", private_key=private_pem, **extra)


def test_token_is_rs256_signed_with_kid(
    app_factory: Callable[..., Flask],
    rsa_key: rsa.RSAPrivateKey,
    private_pem: str,
    clock: FixedClock,
) -> None:
    clock.now = datetime.now(UTC)
    app = app_factory(credentials=_credentials(private_pem))

    with app.test_client() as client:
        response = client.post(
            "/token",
            json={"name": "Alice", "room": "standup", "email": "alice@example.com"},
        )

    assert response.status_code == 200
    token = response.get_json()["token"]

    header = jwt.get_unverified_header(token)
    assert header["alg"] == "RS256"
    assert header["kid"] == "vpaas-magic/abc123"

    claims = jwt.decode(token, rsa_key.public_key(), algorithms=["RS256"], audience="jitsi")
    assert claims["iss"] == "chat"
    assert claims["sub"] == "vpaas-magic"
    assert claims["room"] == "standup"
    assert claims["exp"] - claims["iat"] == 7200
    assert claims["iat"] - claims["nbf"] == 5
    user = claims["context"]["user"]
    assert user["name"] == "Alice"
    assert user["email"] == "alice@example.com"
    assert user["moderator"] is False
    assert user["id"].startswith("auth0|") and len(user["id"]) == len("auth0|") + 24
    assert claims["context"]["features"]["recording"] is False


def test_token_defaults_for_anonymous_guest(
    app_factory: Callable[..., Flask], rsa_key: rsa.RSAPrivateKey, private_pem: str, clock: FixedClock
) -> None:
    clock.now = datetime.now(UTC)
    app = app_factory(credentials=_credentials(private_pem))

    with app.test_client() as client:
        token = client.post("/token", json={}).get_json()["token"]

    claims = jwt.decode(token, rsa_key.public_key(), algorithms=["RS256"], audience="jitsi")
    assert claims["room"] == "*"
    assert claims["context"]["user"]["name"] == "Guest"
    assert claims["context"]["user"]["email"] == ""


def test_token_without_private_key_fails(app_factory: Callable[..., Flask]) -> None:
    app = app_factory()

    with app.test_client() as client:
        response = client.post("/token", json={"name": "Alice"})

    assert response.status_code == 500
    assert response.get_json()["error"] == "token_signing_failed"


def test_token_with_broken_key_fails(app_factory: Callable[..., Flask]) -> None:
    app = app_factory(credentials=CredentialsConfig(app_id="a/b", private_key="not a key"))

    with app.test_client() as client:
        response = client.post("/token", json={"name": "Alice"})

    assert response.status_code == 500
    assert response.get_json()["error"] == "token_signing_failed"


def test_private_key_newline_escapes_are_expanded(private_pem: str) -> None:
    escaped = private_pem.replace("\n", "\\n")
    assert CredentialsConfig(private_key=escaped).private_key == private_pem


@pytest.mark.parametrize(
    ("name", "marker", "expected"),
    [
        ("Meeting Host", "host", True),
        ("HOSTESS", "host", True),
        ("Guest", "host", False),
        (None, "host", False),
        ("Taher Ali", "taher", True),
        ("anyone", "", False),
    ],
)
def test_is_moderator_matches_marker_case_insensitively(
    name: str | None, marker: str, expected: bool
) -> None:
    assert is_moderator(name, marker) is expected


def test_moderator_gets_recording_features(clock: FixedClock) -> None:
    class CapturingSigner:
        def __init__(self) -> None:
            self.claims: dict | None = None

        def sign(self, claims) -> str:
            self.claims = dict(claims)
            return "signed"

    signer = CapturingSigner()
    use_case = IssueTokenUseCase(
        signer=signer,
        config=CredentialsConfig(app_id="app/key", moderator_marker="host"),
        clock=clock,
    )

    assert use_case.execute(IssueTokenInput(name="The Host", room="r1")) == "signed"

    assert signer.claims is not None
    assert signer.claims["iat"] == int(clock.now.timestamp())
    assert signer.claims["sub"] == "app"
    features = signer.claims["context"]["features"]
    assert features["livestreaming"] is True
    assert features["recording"] is True
    assert signer.claims["context"]["user"]["moderator"] is True
