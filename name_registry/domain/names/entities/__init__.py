"""Names Entities"""
from .name_record import NameRecord

__all__ = ["NameRecord"]
