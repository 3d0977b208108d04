from pydantic import Field, field_validator

from booking_engine.payment.domain import PaymentOutcome
from booking_engine.shared.utils import WireModel


class PaymentCallbackRequest(WireModel):
    """決済結果コールバックのリクエストモデル"""

    correlation_token: str = Field(..., min_length=1)
    outcome: PaymentOutcome = Field(..., description="SUCCEEDED または FAILED")

    @field_validator("outcome", mode="before")
    @classmethod
    def normalize_outcome(cls, v):
        # プロバイダは小文字（succeeded / failed）で送ってくる
        if isinstance(v, str):
            v = v.strip().upper()
        if v == PaymentOutcome.PENDING:
            raise ValueError("Callback outcome must be final")
        return v
