from abc import abstractmethod

from booking_engine.booking.domain import BookingNumber
from booking_engine.payment.domain.entity import PaymentIntent
from booking_engine.payment.domain.value_object import CorrelationToken
from booking_engine.shared.domain import Repository


class PaymentIntentRepository(Repository[PaymentIntent, CorrelationToken]):
    """決済要求リポジトリのインターフェース"""

    @abstractmethod
    def save(self, intent: PaymentIntent) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, token: CorrelationToken) -> PaymentIntent | None:
        """相関トークンで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking(self, booking_number: BookingNumber) -> list[PaymentIntent]:
        """予約番号に紐づく決済要求を作成順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update(self, intent: PaymentIntent) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, token: CorrelationToken) -> None:
        raise NotImplementedError

    def find_pending_by_booking(
        self, booking_number: BookingNumber
    ) -> PaymentIntent | None:
        """結果待ちの決済要求を返す（高々1件）"""
        for intent in self.find_by_booking(booking_number):
            if intent.is_pending:
                return intent
        return None
