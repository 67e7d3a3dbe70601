"""Repository Implementations"""
from .dynamodb_name_repository import DynamoDBNameRepository
from .in_memory_name_repository import InMemoryNameRepository

__all__ = ["DynamoDBNameRepository", "InMemoryNameRepository"]
