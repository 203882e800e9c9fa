from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> List[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


class Settings(BaseSettings):
    """環境変数と .env から読み込むアプリケーション設定"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "IITian Dost Core API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # 推論呼び出しの遅延を模擬する待ち時間（秒）
    SOLVE_DELAY_SECONDS: float = Field(default=1.5, ge=0)
    SOLUTION_PROVIDER: str = "template"

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    HOST: str = "0.0.0.0"
    PORT: int = 1234

    @property
    def cors_origins_list(self) -> List[str]:
        return _split_csv(self.CORS_ORIGINS)


@lru_cache
def get_settings() -> Settings:
    """キャッシュされた設定インスタンス"""
    return Settings()
