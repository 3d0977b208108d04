from abc import ABC, abstractmethod
from typing import TypedDict

from booking_engine.payment.domain.entity import PaymentIntent


class CheckoutDetails(TypedDict):
    """決済開始 API の応答データ構造"""

    payment_url: str | None
    provider_reference: str | None


class PaymentGateway(ABC):
    """決済開始 API のインターフェース"""

    @abstractmethod
    async def initiate(self, intent: PaymentIntent) -> CheckoutDetails:
        """プロバイダに決済開始を依頼する

        結果はコールバックで非同期に届く。

        Raises:
            PaymentFailedException: プロバイダが開始を拒否した、または応答しない場合
        """
        raise NotImplementedError
