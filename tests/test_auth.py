from datetime import datetime, timedelta, timezone

import pytest

from interview_sim.auth import AuthService, InMemoryUserRepository
from interview_sim.interview import AuthenticationError, InputError


@pytest.fixture
def auth():
    return AuthService(InMemoryUserRepository())


def test_register_hashes_password(auth):
    user = auth.register("ada@example.com", "s3cret")

    assert user.password_hash != "s3cret"
    assert auth.repository.find("ADA@example.com") is user


def test_register_requires_fields(auth):
    with pytest.raises(InputError):
        auth.register("", "pw")
    with pytest.raises(InputError):
        auth.register("ada@example.com", "")


def test_duplicate_registration_rejected(auth):
    auth.register("ada@example.com", "s3cret")
    with pytest.raises(InputError):
        auth.register("ada@example.com", "other")


def test_login_issues_token(auth):
    auth.register("ada@example.com", "s3cret")
    result = auth.login("ada@example.com", "s3cret")

    assert len(result["token"]) == 64
    assert datetime.fromisoformat(result["expires_at"]) > datetime.now(timezone.utc)
    assert auth.resolve_token(result["token"]) == "ada@example.com"


def test_login_rejects_bad_credentials(auth):
    auth.register("ada@example.com", "s3cret")

    with pytest.raises(AuthenticationError):
        auth.login("ada@example.com", "wrong")
    with pytest.raises(AuthenticationError):
        auth.login("nobody@example.com", "s3cret")


def test_expired_token_is_dropped(auth):
    auth.register("ada@example.com", "s3cret")
    token = auth.login("ada@example.com", "s3cret")["token"]
    auth._tokens[token] = ("ada@example.com", datetime.now(timezone.utc) - timedelta(seconds=1))

    assert auth.resolve_token(token) is None
    assert auth.resolve_token("unknown") is None
