"""Health Check Routes"""
from typing import Annotated

from fastapi import APIRouter, Depends

from name_registry.infrastructure.config import Settings
from name_registry.presentation.api.dependencies import get_app_settings

router = APIRouter()

AppSettings = Annotated[Settings, Depends(get_app_settings)]


@router.get("/health")
async def health_check(settings: AppSettings) -> dict:
    """ヘルスチェック"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
    }


@router.get("/ready")
async def readiness_check(settings: AppSettings) -> dict:
    """レディネスチェック"""
    return {
        "status": "ready",
        "store": {
            "backend": settings.store_backend,
            "table_name": settings.dynamodb_table_name,
            "region": settings.aws_region,
        },
    }
