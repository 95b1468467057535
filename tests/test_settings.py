"""
Tests for settings and the auth configuration built from them.
"""
from datetime import timedelta

import pytest

from vaad.auth.config import AuthConfig, DEFAULT_TOKEN_TTL
from vaad.auth.exceptions import ConfigurationError
from vaad.core.settings import Settings


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "JWT_SECRET_KEY": "k" * 40}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestAuthConfigFromSettings:
    def test_defaults(self):
        config = AuthConfig.from_settings(make_settings())

        assert config.secret_key == "k" * 40
        assert config.token_ttl == DEFAULT_TOKEN_TTL == timedelta(hours=24)
        assert config.cookie_max_age == 86400
        assert config.cookie_name == "auth-token"
        assert config.cookie_secure is False

    def test_production_sets_secure_cookie(self):
        config = AuthConfig.from_settings(make_settings(APP_ENV="production"))
        assert config.cookie_secure is True

    def test_explicit_cookie_secure_wins(self):
        config = AuthConfig.from_settings(
            make_settings(APP_ENV="production", COOKIE_SECURE=False)
        )
        assert config.cookie_secure is False

    def test_custom_ttl(self):
        config = AuthConfig.from_settings(make_settings(SESSION_TTL_HOURS=2))
        assert config.token_ttl == timedelta(hours=2)
        assert config.cookie_max_age == 7200

    def test_password_hash_is_trimmed(self):
        config = AuthConfig.from_settings(make_settings(ADMIN_PASSWORD_HASH=" $2b$10$abc \n"))
        assert config.password_hash == "$2b$10$abc"

    def test_blank_values_become_none(self):
        config = AuthConfig.from_settings(
            make_settings(JWT_SECRET_KEY="", ADMIN_PASSWORD_HASH="   ")
        )
        assert config.secret_key is None
        assert config.password_hash is None

    def test_config_is_immutable(self):
        config = AuthConfig.from_settings(make_settings())
        with pytest.raises(AttributeError):
            config.secret_key = "changed"


class TestRequireSigningKey:
    def test_returns_key(self):
        assert AuthConfig(secret_key="k" * 32).require_signing_key() == "k" * 32

    @pytest.mark.parametrize("secret_key", [None, "", "k" * 31])
    def test_rejects_missing_or_short_key(self, secret_key):
        with pytest.raises(ConfigurationError):
            AuthConfig(secret_key=secret_key).require_signing_key()
