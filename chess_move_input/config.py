"""Configuration module for loading environment variables and settings."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import BaseModel, ValidationError

# Track whether environment has been loaded
_ENV_LOADED = False

# Settings field -> environment variable overriding it
SETTINGS_ENV_VARS = {
    "filter_active_color": "MOVE_INPUT_FILTER_ACTIVE_COLOR",
    "coordinate_fallback": "MOVE_INPUT_COORDINATE_FALLBACK",
    "fen_env_var": "MOVE_INPUT_FEN_ENV_VAR",
}


def load_env(filename: str | None = None, override: bool = False) -> Path | None:
    """Load environment variables from .env file.

    Once loaded, subsequent calls are skipped unless override=True.
    Tests should use override=True to reload different configs.

    Args:
        filename: Optional .env filename. Defaults to ENV_FILE env var or '.env'.
        override: Whether to override existing environment variables.

    Returns:
        Path to the .env file that was loaded, or None if not found.
    """
    global _ENV_LOADED

    if _ENV_LOADED and not override:
        return None

    env_file = filename or os.environ.get("ENV_FILE", ".env")
    dotenv_path = find_dotenv(env_file, usecwd=True)

    if dotenv_path:
        load_dotenv(dotenv_path, override=override)
        _ENV_LOADED = True
        logger.debug(f"Loaded environment from: {dotenv_path}")
        return Path(dotenv_path)
    else:
        logger.debug(f"No .env file found: {env_file}")
        return None


class MoveInputSettings(BaseModel):
    """Tunable behavior of the typed-move command."""

    # Only match pieces of the side to move when the board reports it
    filter_active_color: bool = True
    # Retry as coordinate notation when the algebraic reading matches nothing
    coordinate_fallback: bool = True
    # Environment variable holding a FEN for FenBoardLocator
    fen_env_var: str = "MOVE_INPUT_FEN"


def get_settings() -> MoveInputSettings:
    """Build settings from the environment, loading .env first.

    Returns:
        Settings with MOVE_INPUT_* overrides applied.
    """
    load_env()
    overrides = {
        field: os.environ[env_var].strip()
        for field, env_var in SETTINGS_ENV_VARS.items()
        if env_var in os.environ
    }

    try:
        return MoveInputSettings.model_validate(overrides)
    except ValidationError as e:
        for error in e.errors():
            field = error["loc"][0]
            logger.warning(
                f"Ignoring invalid value for {SETTINGS_ENV_VARS[field]}: "
                f"'{overrides.pop(field)}'"
            )
    return MoveInputSettings.model_validate(overrides)
