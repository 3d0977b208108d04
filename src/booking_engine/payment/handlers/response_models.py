from pydantic import BaseModel

from booking_engine.payment.domain import PaymentIntent


class PaymentIntentData(BaseModel):
    """決済要求データのレスポンスモデル"""

    correlation_token: str
    booking_number: str
    provider: str
    amount: str
    currency: str
    outcome: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentIntentData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(intent: PaymentIntent) -> dict:
    """PaymentIntent エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=PaymentIntentData(
            correlation_token=str(intent.correlation_token),
            booking_number=str(intent.booking_number),
            provider=intent.provider.value,
            amount=str(intent.amount.amount),
            currency=str(intent.amount.currency),
            outcome=intent.outcome.value,
        )
    ).model_dump()


def error_response(error_code: str, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
