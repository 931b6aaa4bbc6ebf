"""Application settings

Settings are loaded in order of precedence (highest to lowest):
1. Environment variables (REGIONPEDIA_*)
2. Config file (~/.regionpedia/config.toml)
3. Default values
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal, Type

from pydantic import field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from regionpedia.models.region import DEFAULT_REGION, expand_region

logger = logging.getLogger("regionpedia")


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".regionpedia" / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        config_data = self._load_config()
        if field_name in config_data:
            return config_data[field_name], field_name, False
        return None, field_name, False

    def _load_config(self) -> dict:
        """Load config from TOML file."""
        if not hasattr(self, '_config_cache'):
            self._config_cache = {}
            config_path = get_config_path()
            if config_path.exists():
                try:
                    with open(config_path, "rb") as f:
                        self._config_cache = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError) as e:
                    logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return self._config_cache

    def __call__(self) -> dict[str, Any]:
        """Return all settings from config file."""
        return self._load_config()


class Settings(BaseSettings):
    """Application settings

    Settings can be configured via:
    - Environment variables: REGIONPEDIA_<SETTING_NAME>
    - Config file: ~/.regionpedia/config.toml

    Example config.toml:
        default_region = "uw2"
        aws_profile = "my-profile"
        strict = true
    """

    model_config = SettingsConfigDict(
        env_prefix="REGIONPEDIA_",
        case_sensitive=False
    )

    # Region used when no region is given; shorthand is expanded on load
    default_region: str = DEFAULT_REGION
    aws_profile: str | None = None

    # Reject expanded regions that are not known AWS regions
    strict: bool = False

    output_format: Literal["table", "json", "csv"] = "table"

    @field_validator("default_region")
    @classmethod
    def expand_default_region(cls, value: str) -> str:
        """Allow the default region to be written as shorthand."""
        if not value:
            return DEFAULT_REGION
        return expand_region(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources order.

        Order (highest to lowest priority):
        1. Init settings (passed to constructor)
        2. Environment variables
        3. TOML config file
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )


def create_default_config() -> str:
    """Generate default config file content."""
    return '''# Regionpedia Configuration
# Place this file at ~/.regionpedia/config.toml

# Region used when none is given (shorthand such as "uw2" is accepted)
# default_region = "us-east-1"

# AWS profile used by 'regionpedia regions --source account'
# aws_profile = "default"

# Reject expanded regions that are not known AWS regions
# strict = false

# Output format: table, json or csv
# output_format = "table"
'''
