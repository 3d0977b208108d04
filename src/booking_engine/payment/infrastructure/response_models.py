from booking_engine.shared.utils import WireModel


class PaymentInitiationResponse(WireModel):
    """決済開始レスポンスモデル"""

    payment_url: str | None = None
    provider_reference: str | None = None
