"""Name Use Cases"""
from .create_name import (
    CreateNameInput,
    CreateNameOutput,
    CreateNameUseCase,
    NameCreationError,
    NameValidationError,
)
from .delete_name import (
    DeleteNameInput,
    DeleteNameUseCase,
    NameDeletionError,
)
from .get_name import (
    GetNameInput,
    GetNameOutput,
    GetNameUseCase,
    NameNotFoundError,
)
from .list_names import (
    ListNamesOutput,
    ListNamesUseCase,
)

__all__ = [
    "CreateNameInput",
    "CreateNameOutput",
    "CreateNameUseCase",
    "NameCreationError",
    "NameValidationError",
    "DeleteNameInput",
    "DeleteNameUseCase",
    "NameDeletionError",
    "GetNameInput",
    "GetNameOutput",
    "GetNameUseCase",
    "NameNotFoundError",
    "ListNamesOutput",
    "ListNamesUseCase",
]
