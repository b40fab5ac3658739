from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    app_name: str = 'File Browser'
    app_host: str = '127.0.0.1'
    app_port: int = Field(default=7788, ge=1, le=65535)
    browse_root: str = '.'
    browse_template: Literal['standalone', 'files_only'] = 'standalone'
    log_level: Literal['critical', 'error', 'warning', 'info', 'debug', 'trace'] = 'info'
    log_json: bool = False


settings = Settings()
