"""Settings loading from environment and dotenv files."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from telegram_mcp.config import Settings, load_config
from telegram_mcp.errors import ConfigurationError


def test_load_from_environment(clean_env) -> None:
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "111:abc")
    clean_env.setenv("TELEGRAM_CHAT_ID", "42")

    config = load_config()

    assert config.bot_token == "111:abc"
    assert config.chat_id == "42"
    assert config.api_base == "https://api.telegram.org"


def test_missing_both_variables(clean_env) -> None:
    with pytest.raises(ConfigurationError) as exc:
        load_config()

    message = str(exc.value)
    assert "TELEGRAM_BOT_TOKEN" in message
    assert "TELEGRAM_CHAT_ID" in message
    assert "required" in message


def test_empty_chat_id_is_rejected(clean_env) -> None:
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "111:abc")
    clean_env.setenv("TELEGRAM_CHAT_ID", "   ")

    with pytest.raises(ConfigurationError) as exc:
        load_config()

    assert "TELEGRAM_CHAT_ID" in str(exc.value)
    assert "TELEGRAM_BOT_TOKEN" not in str(exc.value)


def test_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / "telegram.env"
    env_file.write_text(
        "TELEGRAM_BOT_TOKEN=222:def\n"
        "TELEGRAM_CHAT_ID=7\n"
        "TELEGRAM_API_BASE=http://localhost:8081/\n"
        "UNRELATED=1\n",
        encoding="utf-8",
    )

    config = load_config(env_file)

    assert config.bot_token == "222:def"
    assert config.chat_id == "7"
    assert config.api_base == "http://localhost:8081"


def test_environment_overrides_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TELEGRAM_BOT_TOKEN=from-file\nTELEGRAM_CHAT_ID=1\n", encoding="utf-8")
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "from-env")

    config = load_config()

    assert config.bot_token == "from-env"
    assert config.chat_id == "1"


def test_settings_are_immutable(settings: Settings) -> None:
    with pytest.raises(PydanticValidationError):
        settings.chat_id = "other"


def test_redacted_token(settings: Settings) -> None:
    assert settings.redacted_token == "123456:T..."
    assert settings.bot_token not in settings.redacted_token
