"""
Config loading.
"""

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from telegram_mcp.config.schema import Settings
from telegram_mcp.errors import ConfigurationError


def load_config(env_file: Path | None = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional dotenv file. Defaults to ./.env when present.

    Returns:
        Validated, immutable Settings.

    Raises:
        ConfigurationError: TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID is
            missing or empty.
    """
    try:
        if env_file is None:
            return Settings()
        return Settings(_env_file=env_file)
    except PydanticValidationError as e:
        variables = sorted(
            {f"TELEGRAM_{str(err['loc'][0]).upper()}" for err in e.errors() if err["loc"]}
        )
        if len(variables) == 1:
            message = f"{variables[0]} environment variable is required"
        else:
            names = " and ".join(variables) or "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID"
            message = f"{names} environment variables are required"
        raise ConfigurationError(message) from e
