import datetime as dt

from booking_engine.booking.domain import BookingNumber
from booking_engine.payment.domain.enum import PaymentOutcome, PaymentProvider
from booking_engine.payment.domain.value_object import CorrelationToken
from booking_engine.shared.domain import AggregateRoot, Money
from booking_engine.shared.domain.exception import BusinessRuleViolationException


class PaymentIntent(AggregateRoot[CorrelationToken]):
    """決済要求（一時的なエンティティ）

    金額は開始時点の予約合計をそのまま写したもので、再計算しない。
    結果が確定した後は変更されない。
    """

    def __init__(
        self,
        id: CorrelationToken,
        booking_number: BookingNumber,
        provider: PaymentProvider,
        amount: Money,
        expires_at: dt.datetime,
        outcome: PaymentOutcome = PaymentOutcome.PENDING,
        payment_url: str | None = None,
        provider_reference: str | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_number = booking_number
        self._provider = provider
        self._amount = amount
        self._expires_at = expires_at
        self._outcome = outcome
        self._payment_url = payment_url
        self._provider_reference = provider_reference

    @property
    def correlation_token(self) -> CorrelationToken:
        return self.id

    @property
    def booking_number(self) -> BookingNumber:
        return self._booking_number

    @property
    def provider(self) -> PaymentProvider:
        return self._provider

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def expires_at(self) -> dt.datetime:
        return self._expires_at

    @property
    def outcome(self) -> PaymentOutcome:
        return self._outcome

    @property
    def payment_url(self) -> str | None:
        """プロバイダの決済画面 URL（代金引換では None）"""
        return self._payment_url

    @property
    def provider_reference(self) -> str | None:
        return self._provider_reference

    @property
    def is_pending(self) -> bool:
        return self._outcome == PaymentOutcome.PENDING

    def is_expired(self, now: dt.datetime) -> bool:
        """コールバック待ちの期限を過ぎたか"""
        return self.is_pending and now >= self._expires_at

    def attach_checkout(
        self, payment_url: str | None, provider_reference: str | None
    ) -> None:
        """プロバイダから受け取った決済画面の情報を記録する"""
        self._payment_url = payment_url
        self._provider_reference = provider_reference

    def resolve(self, outcome: PaymentOutcome) -> bool:
        """決済結果を確定する

        同じ結果が再度届いた場合は何もせず False を返す。

        Raises:
            BusinessRuleViolationException: 確定済みの結果と異なる結果が届いた場合
        """
        if not outcome.is_final:
            raise ValueError("Outcome must be SUCCEEDED or FAILED")
        if self._outcome == outcome:
            return False
        if self._outcome.is_final:
            raise BusinessRuleViolationException(
                f"Payment {self.id} already resolved as {self._outcome.value}"
            )
        self._outcome = outcome
        return True
