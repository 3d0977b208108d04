import httpx

from booking_engine.payment.domain import CheckoutDetails, PaymentGateway, PaymentIntent
from booking_engine.payment.infrastructure.request_models import (
    PaymentInitiationRequest,
)
from booking_engine.payment.infrastructure.response_models import (
    PaymentInitiationResponse,
)
from booking_engine.shared.domain.exception import PaymentFailedException
from booking_engine.shared.utils import get_logger, resolve_base_url, resolve_timeout

logger = get_logger("payment")


class HttpPaymentGateway(PaymentGateway):
    """HTTP 決済 API を使用した PaymentGateway の具象実装"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = resolve_base_url(base_url, "PAYMENT_API_URL")
        self.timeout = resolve_timeout(timeout)
        self._transport = transport

    async def initiate(self, intent: PaymentIntent) -> CheckoutDetails:
        """POST /payments/initiate で決済を開始する"""
        booking_number = str(intent.booking_number)
        body = PaymentInitiationRequest.from_intent(intent).to_payload()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self.base_url}/payments/initiate", json=body
                )
        except httpx.HTTPError as e:
            logger.warning(
                "Payment request failed",
                booking_number=booking_number,
                reason=str(e),
            )
            raise PaymentFailedException(
                f"Payment provider is unreachable: {e}", booking_number=booking_number
            ) from e

        if response.is_error:
            raise PaymentFailedException(
                f"Payment provider responded with {response.status_code}",
                booking_number=booking_number,
            )

        try:
            model = PaymentInitiationResponse.model_validate(response.json())
        except ValueError as e:
            logger.exception("Malformed payment initiation response")
            raise PaymentFailedException(
                "Payment provider returned an unreadable response",
                booking_number=booking_number,
            ) from e

        return {
            "payment_url": model.payment_url,
            "provider_reference": model.provider_reference,
        }
