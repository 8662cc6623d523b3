"""Converter configuration loaded from environment variables.

Command line arguments take precedence over these values.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class OursConfig(BaseSettings):
    """Converter configuration loaded from environment variables.

    Settings are loaded from OURS_* environment variables with sensible
    defaults. For local use, create a .env file in the working directory.
    """

    # Templates
    templates_dir: str = Field(
        default="templates",
        description="Directory holding the slot/base templates and the stylesheet",
    )
    base_template: str = Field(
        default="base.html",
        description="Outer template receiving the day fragments and the stylesheet",
    )
    slot_template: str = Field(
        default="slot.html",
        description="Template rendered once per slot",
    )
    styles_file: str = Field(
        default="stylus.css",
        description="Stylesheet inserted verbatim into the base template",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "OURS_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: OursConfig | None = None


def get_config() -> OursConfig:
    """Get the converter configuration singleton.

    Returns:
        OursConfig: Converter configuration instance
    """
    global _config
    if _config is None:
        _config = OursConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
