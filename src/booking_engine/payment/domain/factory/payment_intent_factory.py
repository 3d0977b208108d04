import datetime as dt

from booking_engine.booking.domain import BookingRecord
from booking_engine.payment.domain.entity import PaymentIntent
from booking_engine.payment.domain.enum import PaymentOutcome, PaymentProvider
from booking_engine.payment.domain.value_object import CorrelationToken


class PaymentIntentFactory:
    """決済要求のファクトリ

    - 再試行のたびに新しい相関トークンを生成
    - 金額は予約レコードの合計をそのまま使う
    """

    def create(
        self,
        record: BookingRecord,
        provider: PaymentProvider,
        expires_at: dt.datetime,
    ) -> PaymentIntent:
        return PaymentIntent(
            id=CorrelationToken.generate(),
            booking_number=record.booking_number,
            provider=provider,
            amount=record.total,
            expires_at=expires_at,
            outcome=PaymentOutcome.PENDING,
        )
