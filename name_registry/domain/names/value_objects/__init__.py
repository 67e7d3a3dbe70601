"""Names Value Objects"""
from .full_name import FullName, InvalidFullNameError

__all__ = ["FullName", "InvalidFullNameError"]
