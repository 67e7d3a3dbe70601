"""Names Domain Module"""
from .entities.name_record import NameRecord
from .value_objects.full_name import FullName, InvalidFullNameError

__all__ = [
    "NameRecord",
    "FullName",
    "InvalidFullNameError",
]
