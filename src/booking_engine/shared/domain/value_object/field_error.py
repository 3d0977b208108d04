from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """フィールド単位エラーの種別"""

    VALIDATION = "VALIDATION"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"


@dataclass(frozen=True)
class FieldError:
    """画面上の入力項目に紐づくエラー

    例外ではなく値として返し、呼び出し側が該当フィールドを強調表示する。
    """

    field: str
    reason: str
    kind: ErrorKind = ErrorKind.VALIDATION

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"

    @classmethod
    def capacity(cls, field: str, reason: str) -> "FieldError":
        return cls(field=field, reason=reason, kind=ErrorKind.CAPACITY_EXCEEDED)
