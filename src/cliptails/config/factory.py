# region Docstring
"""
cliptails.config.factory
Factory module for creating settings objects with multi-source configuration support.
Overview:
- Provides a custom Pydantic BaseSettings subclass that loads configuration from
    YAML files, environment variables and .env files.
- Implements a cached factory function so each settings class is only built once.
Contents:
- Classes:
    - FactoryBaseSettings:
        BaseSettings subclass with a priority-based source chain.
        Configuration Priority (highest to lowest):
            1. Environment variables
            2. .env file values
            3. YAML files (config.{env}.yaml, then config.yaml)
            4. Init kwargs
            5. Field defaults
- Functions:
    - get_settings(settings_cls: Type[T]) -> T:
        LRU-cached factory returning one instance per settings class.
Design notes:
- List fields opt out of JSON decoding (NoDecode) in the settings classes; their
    validators accept either a JSON list or a single bare value.
"""

# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import APP_ENV, APP_ROOT

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)


class FactoryBaseSettings(BaseSettings):
    """
    Custom BaseSettings that supports YAML and Env Vars.
    Priority: Env Vars > .env > YAML (Env specific) > YAML (Default) > Init > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=APP_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:

        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=[APP_ROOT / "config.yaml", APP_ROOT / f"config.{APP_ENV}.yaml"],
        )
        return (
            env_settings,
            dotenv_settings,
            yaml_settings,
            init_settings,
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Factory function to load any settings class.
    Results are cached so files are only read once per class.
    """
    return settings_cls()


# endregion
