from __future__ import annotations

import pydantic
import pytest

from anonbox.infrastructure.container import Container
from anonbox.shared.config.settings import AppConfig, DatabaseConfig, SecurityConfig


def test_production_rejects_default_secret() -> None:
    with pytest.raises(pydantic.ValidationError):
        AppConfig(APP_ENV="production", JWT_SECRET="dev_secret_only_for_local")


def test_production_accepts_real_secret() -> None:
    config = AppConfig(APP_ENV="prod", JWT_SECRET="a-real-and-long-random-secret-value")

    assert config.is_production()
    assert not config.uses_insecure_secret()


def test_development_tolerates_default_secret() -> None:
    config = AppConfig(APP_ENV="development", JWT_SECRET="dev_secret_only_for_local")

    assert not config.is_production()
    assert config.uses_insecure_secret()


def test_allowed_origins_from_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:3000, https://anonbox.example ,")

    assert SecurityConfig().allowed_origins == [
        "http://localhost:3000",
        "https://anonbox.example",
    ]


def test_nested_database_config_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "3")

    config = AppConfig()

    assert config.database.url == "sqlite:///elsewhere.db"
    assert config.database.pool_size == 3


def test_port_must_be_valid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(pydantic.ValidationError):
        AppConfig()


def test_database_defaults() -> None:
    config = DatabaseConfig(url="sqlite:///x.db")

    assert config.pool_size == 10
    assert config.max_overflow == 5


def test_password_hashing_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
    monkeypatch.setenv("PASSWORD_SALT_LENGTH", "12")

    hasher = Container(AppConfig()).password_hasher
    hashed = hasher.hash("secret1")

    method, salt, _ = hashed.split("$")
    assert method == "pbkdf2:sha256:1000"
    assert len(salt) == 12
    assert hasher.verify("secret1", hashed)


def test_password_salt_length_is_bounded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORD_SALT_LENGTH", "2")

    with pytest.raises(pydantic.ValidationError):
        SecurityConfig()
