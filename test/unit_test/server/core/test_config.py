"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that the grouped configuration views work as expected.
"""

from pathlib import Path

import pytest

from skillbridge.server.core.config import CORSConfig, JWTConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_host_binding(self, env_example_vars: dict[str, str], monkeypatch):
        host = env_example_vars["SKILLBRIDGE_SERVER_HOST"]
        monkeypatch.setenv("SKILLBRIDGE_SERVER_HOST", host)

        assert Settings().server_host == host

    def test_server_port_binding(self, env_example_vars: dict[str, str], monkeypatch):
        port = env_example_vars["SKILLBRIDGE_SERVER_PORT"]
        monkeypatch.setenv("SKILLBRIDGE_SERVER_PORT", port)

        assert Settings().server_port == int(port)

    def test_log_level_binding(self, monkeypatch):
        monkeypatch.setenv("SKILLBRIDGE_LOG_LEVEL", "debug")

        assert Settings().log_level.upper() == "DEBUG"

    def test_file_logging_binding(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_FILE_DIR", str(tmp_path))
        monkeypatch.setenv("ENABLE_FILE_LOGGING", "true")

        loaded = Settings()

        assert loaded.log_format == "json"
        assert loaded.log_file_dir == str(tmp_path)
        assert loaded.enable_file_logging is True

    def test_file_logging_off_by_default(self, monkeypatch):
        monkeypatch.delenv("ENABLE_FILE_LOGGING", raising=False)

        assert Settings().enable_file_logging is False

    def test_database_url_binding(self):
        """The test session runs against in-memory SQLite."""
        assert Settings().database_url == "sqlite+aiosqlite:///:memory:"

    def test_bcrypt_rounds_binding(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "10")

        assert Settings().bcrypt_rounds == 10

    def test_bcrypt_rounds_out_of_range(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "2")

        with pytest.raises(ValueError):
            Settings()

    def test_cors_origins_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", env_example_vars["CORS_ORIGINS"])

        assert Settings().cors_origins == ["http://localhost:3000"]

    def test_example_covers_every_setting(self, env_example_vars: dict[str, str]):
        aliases = {field.alias for field in Settings.model_fields.values()}

        assert aliases <= set(env_example_vars)


class TestGroupedConfig:
    def test_jwt_view(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "another-secret")
        monkeypatch.setenv("JWT_EXPIRES_MINUTES", "15")

        jwt = Settings().jwt

        assert isinstance(jwt, JWTConfig)
        assert jwt.secret == "another-secret"
        assert jwt.algorithm == "HS256"
        assert jwt.expires_minutes == 15

    def test_cors_view(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://skillbridge.example"]')
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")

        cors = Settings().cors

        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["https://skillbridge.example"]
        assert cors.allow_credentials is False
        assert cors.allow_methods == ["*"]

    def test_cors_defaults(self):
        cors = CORSConfig()

        assert cors.origins == ["*"]
        assert cors.allow_headers == ["*"]
