import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_missing_secret_key_fails(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)
    assert "SECRET_KEY" in str(exc_info.value)


def test_blank_secret_key_fails(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_secret_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-the-environment")
    settings = Settings(_env_file=None)
    assert settings.SECRET_KEY == "from-the-environment"


def test_defaults(monkeypatch):
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
    settings = Settings(SECRET_KEY="x", _env_file=None)
    assert settings.ALGORITHM == "HS256"
    assert settings.ACCESS_TOKEN_EXPIRE_DAYS == 7
    assert settings.BCRYPT_ROUNDS == 10


def test_bcrypt_rounds_out_of_range():
    with pytest.raises(ValidationError):
        Settings(SECRET_KEY="x", BCRYPT_ROUNDS=3, _env_file=None)


def test_cors_origins_parsed_from_comma_separated_string():
    settings = Settings(
        SECRET_KEY="x",
        CORS_ORIGINS="http://a.test, http://b.test,,",
        _env_file=None,
    )
    assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]


def test_cors_origins_list_kept():
    settings = Settings(SECRET_KEY="x", CORS_ORIGINS=["http://a.test"], _env_file=None)
    assert settings.get_cors_origins() == ["http://a.test"]


def test_unknown_algorithm_fails():
    with pytest.raises(ValidationError) as exc_info:
        Settings(SECRET_KEY="x", ALGORITHM="bogus", _env_file=None)
    assert "ALGORITHM" in str(exc_info.value)


def test_non_hmac_algorithm_fails():
    # RS256 needs a private key, not the shared SECRET_KEY
    with pytest.raises(ValidationError):
        Settings(SECRET_KEY="x", ALGORITHM="RS256", _env_file=None)


def test_other_hmac_algorithm_accepted():
    assert Settings(SECRET_KEY="x", ALGORITHM="HS512", _env_file=None).ALGORITHM == "HS512"
