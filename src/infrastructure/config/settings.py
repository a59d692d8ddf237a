"""アプリケーション設定.

環境変数（接頭辞 PETITION_）または .env ファイルから読み込む。
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file() -> Path | None:
    """カレントディレクトリから親方向に .env を探す."""
    current = Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """請願比較ツールの設定."""

    model_config = SettingsConfigDict(
        env_prefix="PETITION_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://petition.parliament.uk",
        description="請願サイトのベースURL",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="HTTPリクエストのタイムアウト秒数"
    )
    ranking_limit: int = Field(
        default=20, ge=1, description="各方向に表示する選挙区の件数"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="ログレベル"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定のシングルトンを返す."""
    return Settings()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を読み直す."""
    get_settings.cache_clear()
    return get_settings()
