from abc import ABC, abstractmethod

from booking_engine.booking.domain.entity import BookingSnapshot
from booking_engine.booking.domain.factory import CreationReceipt
from booking_engine.booking.domain.value_object import BookingNumber
from booking_engine.shared.domain import Identity


class SubmissionGateway(ABC):
    """予約作成 API のインターフェース"""

    @abstractmethod
    async def create(self, snapshot: BookingSnapshot, identity: Identity) -> CreationReceipt:
        """予約作成リクエストを送信する

        Raises:
            SubmissionRejectedException: リモート側の業務ルールで拒否された場合
            SubmissionTransportException: 通信エラー・タイムアウト
            AuthenticationRequiredException: 認証が無効な場合
        """
        raise NotImplementedError

    @abstractmethod
    async def cancel(
        self, booking_number: BookingNumber, identity: Identity, reason: str
    ) -> None:
        """予約のキャンセルを依頼する"""
        raise NotImplementedError
