from pydantic import Field

from booking_engine.shared.utils import WireModel


class BookingCreatedResponse(WireModel):
    """予約作成成功レスポンスモデル"""

    booking_number: str = Field(..., min_length=1, examples=["KS2401150001"])
    status: str = "created"


class RejectionDetail(WireModel):
    field: str = "booking"
    reason: str


class RejectionResponse(WireModel):
    """業務ルール違反のレスポンスモデル"""

    message: str = "Booking was rejected"
    errors: list[RejectionDetail] = Field(default_factory=list)
