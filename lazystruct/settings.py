"""Settings of lazystruct, loaded from the environment.

Example:
    LAZYSTRUCT_STRICT_FLOAT_PARSING=true python app.py
"""

from functools import lru_cache

from pydantic_core import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import DotenvType

from lazystruct.errors import InvalidSettingsError

__all__ = ("CoercionSettings", "load_settings", "get_settings")

ENV_PREFIX = "LAZYSTRUCT_"


class CoercionSettings(BaseSettings):
    """Settings controlling how types coerce values."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True)

    strict_float_parsing: bool = False
    """Reject text that is not entirely a number instead of parsing its
    numeric prefix (which turns "abc" into 0.0)."""


def load_settings(env_file: DotenvType | None = None) -> CoercionSettings:
    """Load the settings from the environment and an optional dotenv file.

    Args:
        env_file (DotenvType | None, optional): The dotenv file(s) to read. Defaults to None.

    Raises:
        InvalidSettingsError: If a value from the environment is invalid.

    Returns:
        CoercionSettings: The loaded settings.
    """
    try:
        return CoercionSettings(_env_file=env_file)
    except ValidationError as exc:
        raise InvalidSettingsError(
            f"Invalid {ENV_PREFIX}* settings: {exc}"
        ) from exc


@lru_cache(maxsize=1)
def get_settings() -> CoercionSettings:
    """Return the process wide settings, loaded once.

    Call get_settings.cache_clear() to reload them.
    """
    return load_settings()
