"""API Dependencies"""
from __future__ import annotations

from fastapi import Request

from name_registry.application.ports.repositories import INameRepository
from name_registry.infrastructure.config import Settings, get_settings
from name_registry.infrastructure.repositories import DynamoDBNameRepository


def get_app_settings(request: Request) -> Settings:
    """create_app に渡された設定（未設定なら環境変数から）"""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def get_name_repository(request: Request) -> INameRepository:
    """
    Name Repository の依存性注入

    アプリケーションにリポジトリが割り当て済み（インメモリ構成）ならそれを使い、
    そうでなければアプリケーションの設定から DynamoDB リポジトリを生成する。
    """
    repository = getattr(request.app.state, "name_repository", None)
    if repository is not None:
        return repository

    settings = get_app_settings(request)
    return DynamoDBNameRepository(
        table_name=settings.dynamodb_table_name,
        region=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
