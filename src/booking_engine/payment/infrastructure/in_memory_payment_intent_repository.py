from booking_engine.booking.domain import BookingNumber
from booking_engine.payment.domain import (
    CorrelationToken,
    PaymentIntent,
    PaymentIntentRepository,
)
from booking_engine.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class InMemoryPaymentIntentRepository(PaymentIntentRepository):
    """プロセス内メモリを使用した PaymentIntentRepository の具象実装"""

    def __init__(self) -> None:
        # dict は挿入順を保持するため、作成順の取得にそのまま使える
        self._intents: dict[CorrelationToken, PaymentIntent] = {}

    def save(self, intent: PaymentIntent) -> None:
        if intent.correlation_token in self._intents:
            raise DuplicateResourceException(
                f"Payment intent already exists: {intent.correlation_token}"
            )
        self._intents[intent.correlation_token] = intent

    def find_by_id(self, token: CorrelationToken) -> PaymentIntent | None:
        return self._intents.get(token)

    def find_by_booking(self, booking_number: BookingNumber) -> list[PaymentIntent]:
        return [
            intent
            for intent in self._intents.values()
            if intent.booking_number == booking_number
        ]

    def update(self, intent: PaymentIntent) -> None:
        if intent.correlation_token not in self._intents:
            raise ResourceNotFoundException(
                f"Payment intent not found: {intent.correlation_token}"
            )
        self._intents[intent.correlation_token] = intent

    def delete(self, token: CorrelationToken) -> None:
        self._intents.pop(token, None)
