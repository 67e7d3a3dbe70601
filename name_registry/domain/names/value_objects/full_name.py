"""Full Name Value Object"""
from __future__ import annotations

from dataclasses import dataclass

MIN_LENGTH = 1
MAX_LENGTH = 100

DISPLAY_NAME = "Full Name"
REQUIRED_MESSAGE = "Name is required"
LENGTH_MESSAGE = f"Name must be between {MIN_LENGTH} and {MAX_LENGTH} characters"


class InvalidFullNameError(ValueError):
    """氏名のバリデーションエラー"""

    pass


@dataclass(frozen=True)
class FullName:
    """
    氏名（値オブジェクト）

    入力値はトリムせずそのまま保持する。
    空文字・空白のみは未入力として扱う。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション"""
        self._validate()

    def _validate(self) -> None:
        if self.value is None or not self.value.strip():
            raise InvalidFullNameError(REQUIRED_MESSAGE)

        if not MIN_LENGTH <= len(self.value) <= MAX_LENGTH:
            raise InvalidFullNameError(LENGTH_MESSAGE)

    def __str__(self) -> str:
        return self.value
