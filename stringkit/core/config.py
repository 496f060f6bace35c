from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stringkit import __version__
from stringkit.core.paths import ROOT_PATH

from .configs import LogConfiguration


# noinspection PyArgumentList
class Configuration(BaseSettings):
    """Library configuration."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=ROOT_PATH / '.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    app_name: str = Field('stringkit', description='Library name')
    app_version: str = __version__
    app_environment: Literal['test', 'local', 'dev', 'qa', 'prod'] = Field(
        'local', description='Runtime environment', validation_alias='ENVIRONMENT'
    )

    log: LogConfiguration = Field(default_factory=LogConfiguration)

    @property
    def app_debug(self) -> bool:
        return self.app_environment in ['test', 'local', 'dev']


# noinspection PyArgumentList
@lru_cache
def get_config() -> Configuration:
    """
    Get cached library settings.
    """
    return Configuration()
