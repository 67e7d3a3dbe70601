"""Application Ports (Interfaces)"""
from .repositories import INameRepository, StoreError

__all__ = [
    "INameRepository",
    "StoreError",
]
