from dotenv import load_dotenv
import os

from pydantic import BaseModel, Field

load_dotenv()  # take environment variables from .env

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off", ""}


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_bool(key: str, default: bool) -> bool:
    """Get a boolean environment variable, falling back on unknown values."""
    value = env_get(key)
    if value is None:
        return default

    value = value.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    return default


class TransformerSettings(BaseModel):
    """Defaults applied when a response is configured without explicit options"""

    data_key: str = Field("", description="Envelope key unwrapped from responses")
    parse_errors: bool = Field(
        True, description="Return payloads carrying an `errors` field untouched"
    )
    log_level: str = Field("INFO", description="Level passed to setup_logging")


def load_settings() -> TransformerSettings:
    """Build settings from SIMPLECURL_* environment variables"""
    return TransformerSettings(
        data_key=env_get("SIMPLECURL_DATA_KEY", "") or "",
        parse_errors=env_bool("SIMPLECURL_PARSE_ERRORS", True),
        log_level=(env_get("SIMPLECURL_LOG_LEVEL", "INFO") or "INFO").upper(),
    )
