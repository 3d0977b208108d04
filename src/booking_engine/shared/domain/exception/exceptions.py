from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from booking_engine.shared.domain.value_object.field_error import FieldError


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー"""

    pass


class AuthenticationRequiredException(DomainException):
    """認証が必要な操作を未認証で呼び出した場合（サインインへ誘導する）"""

    pass


class CatalogUnavailableException(DomainException):
    """サービス定義の取得に失敗した場合"""

    def __init__(self, message: str, retryable: bool = True) -> None:
        super().__init__(message)
        self.retryable = retryable


class SubmissionRejectedException(DomainException):
    """予約作成がリモート側のビジネスルールで拒否された場合

    下書きは破棄せず、詳細入力ステップに戻す。
    """

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors: list[FieldError] = list(errors or [])


class SubmissionTransportException(DomainException):
    """予約作成時の通信エラー・タイムアウト（再試行可能）"""

    pass


class PaymentFailedException(DomainException):
    """決済の開始に失敗した、または決済が拒否された場合

    予約自体は存在し、未払いのまま残る。
    """

    def __init__(self, message: str, booking_number: str | None = None) -> None:
        super().__init__(message)
        self.booking_number = booking_number
