from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.security import (
    PasswordHasher,
    create_access_token,
    decode_access_token,
    get_password_hasher,
)


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher(rounds=4)
    first = hasher.hash("secret")
    second = hasher.hash("secret")

    assert first != second
    assert first != "secret"
    assert hasher.verify("secret", first)
    assert hasher.verify("secret", second)
    assert not hasher.verify("wrong", first)


def test_hash_uses_configured_cost_factor():
    hashed = PasswordHasher(rounds=5).hash("secret")
    # Modular crypt format: $2b$<rounds>$<salt+hash>
    assert hashed.split("$")[2] == "05"


def test_hasher_cached_per_cost_factor():
    assert get_password_hasher(4) is get_password_hasher(4)
    assert get_password_hasher(4) is not get_password_hasher(5)


def test_dummy_verify_runs_without_a_user():
    PasswordHasher(rounds=4).dummy_verify()


def test_token_round_trip(settings):
    token = create_access_token({"userId": "u-1", "email": "a@x.com"}, settings)
    payload = decode_access_token(token, settings)

    assert payload["userId"] == "u-1"
    assert payload["email"] == "a@x.com"
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_token_uses_configured_algorithm(settings):
    token = create_access_token({"userId": "u-1", "email": "a@x.com"}, settings)
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_expired_token_rejected(settings):
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = create_access_token({"userId": "u-1", "email": "a@x.com"}, settings, now=issued)
    assert decode_access_token(token, settings) is None


def test_token_signed_with_other_secret_rejected(settings):
    other = settings.model_copy(update={"SECRET_KEY": "another-secret"})
    token = create_access_token({"userId": "u-1", "email": "a@x.com"}, other)
    assert decode_access_token(token, settings) is None


def test_garbage_token_rejected(settings):
    assert decode_access_token("not.a.token", settings) is None
