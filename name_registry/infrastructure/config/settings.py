"""Application Settings"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    model_config = SettingsConfigDict(
        env_prefix="NAMES_",
        env_file=".env",
        case_sensitive=False,
    )

    # Service
    service_name: str = "name-registry"
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # AWS
    aws_region: str = "eu-west-1"

    # DynamoDB
    dynamodb_table_name: str = "Names"
    dynamodb_endpoint_url: str | None = None  # DynamoDB Local 用

    # Persistence backend
    store_backend: Literal["dynamodb", "memory"] = "dynamodb"

    # Session (flash messages)
    session_secret_key: str = "change-me"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
