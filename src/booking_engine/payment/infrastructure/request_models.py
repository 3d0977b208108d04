from decimal import Decimal

from pydantic import Field, field_validator

from booking_engine.payment.domain import PaymentIntent
from booking_engine.shared.utils import WireModel, to_decimal


class PaymentInitiationRequest(WireModel):
    """決済開始リクエストモデル"""

    booking_number: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, description="予約確定時の合計金額")
    currency: str = Field(..., pattern="^[A-Z]{3}$")
    provider_id: str
    correlation_token: str = Field(..., min_length=1)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    @classmethod
    def from_intent(cls, intent: PaymentIntent) -> "PaymentInitiationRequest":
        return cls(
            booking_number=str(intent.booking_number),
            amount=intent.amount.amount,
            currency=str(intent.amount.currency),
            provider_id=intent.provider.value,
            correlation_token=str(intent.correlation_token),
        )
