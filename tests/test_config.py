"""
Tests for settings loading.
"""
import dataclasses

import pytest

from failsafe_bot.core.config import Settings, load_settings

KEYS = [
    "OPENAI_API_KEY", "OPENAI_MODEL", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY",
    "AWS_REGION", "DYNAMODB_TABLE", "SLACK_BOT_TOKEN", "SLACK_SIGNING_SECRET",
    "SLACK_APP_TOKEN", "PRODUCT_NAME", "FETCH_TIMEOUT", "HTTP_HOST", "HTTP_PORT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings keys from the environment, restoring them afterwards."""
    for key in KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


class TestLoadSettings:
    """Test loading settings from a dotenv file."""

    def test_defaults(self):
        settings = load_settings(env_file=None)

        assert settings.OPENAI_MODEL == "gpt-4"
        assert settings.DYNAMODB_TABLE == "BotTrainingData"
        assert settings.HTTP_PORT == 5000
        assert settings.FETCH_TIMEOUT is None
        assert settings.slack_enabled is False

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "OPENAI_API_KEY=sk-file\n"
            "SLACK_BOT_TOKEN=xoxb-file\n"
            "SLACK_SIGNING_SECRET=secret\n"
            "HTTP_PORT=8080\n"
            "FETCH_TIMEOUT=2.5\n"
        )
        settings = load_settings(env_file=str(env_file))

        assert settings.OPENAI_API_KEY == "sk-file"
        assert settings.HTTP_PORT == 8080
        assert settings.FETCH_TIMEOUT == 2.5
        assert settings.slack_enabled is True

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("DYNAMODB_TABLE=FromFile\n")
        monkeypatch.setenv("DYNAMODB_TABLE", "FromEnv")

        assert load_settings(env_file=str(env_file)).DYNAMODB_TABLE == "FromEnv"

    def test_settings_are_immutable(self):
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.OPENAI_MODEL = "other"

    def test_empty_values_fall_back_to_defaults(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "OPENAI_MODEL=\n"
            "DYNAMODB_TABLE=\n"
            "HTTP_PORT=\n"
            "FETCH_TIMEOUT=\n"
            "SLACK_BOT_TOKEN=\n"
        )
        settings = load_settings(env_file=str(env_file))

        assert settings.OPENAI_MODEL == "gpt-4"
        assert settings.DYNAMODB_TABLE == "BotTrainingData"
        assert settings.HTTP_PORT == 5000
        assert settings.FETCH_TIMEOUT is None
        assert settings.slack_enabled is False
