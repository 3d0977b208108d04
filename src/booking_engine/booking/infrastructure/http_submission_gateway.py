import httpx

from booking_engine.booking.domain import (
    BookingNumber,
    BookingSnapshot,
    CreationReceipt,
    SubmissionGateway,
)
from booking_engine.booking.infrastructure.request_models import (
    BookingCreationRequest,
    CancelBookingRequest,
)
from booking_engine.booking.infrastructure.response_models import (
    BookingCreatedResponse,
    RejectionResponse,
)
from booking_engine.shared.domain import FieldError, Identity
from booking_engine.shared.domain.exception import (
    AuthenticationRequiredException,
    BusinessRuleViolationException,
    SubmissionRejectedException,
    SubmissionTransportException,
)
from booking_engine.shared.utils import get_logger, resolve_base_url, resolve_timeout

logger = get_logger("booking")

_AUTH_STATUSES = (401, 403)


class HttpSubmissionGateway(SubmissionGateway):
    """HTTP 予約 API を使用した SubmissionGateway の具象実装

    ステータスコードの対応:
    - 2xx: 予約番号を返す
    - 401/403: AuthenticationRequiredException
    - その他の 4xx: SubmissionRejectedException（フィールドエラー付き）
    - 5xx・タイムアウト・接続エラー: SubmissionTransportException
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = resolve_base_url(base_url, "BOOKING_API_URL")
        self.timeout = resolve_timeout(timeout)
        self._transport = transport

    async def create(
        self, snapshot: BookingSnapshot, identity: Identity
    ) -> CreationReceipt:
        """POST /bookings で予約を作成する"""
        body = BookingCreationRequest.from_snapshot(snapshot).to_payload()
        response = await self._send(
            "POST", f"{self.base_url}/bookings", identity, body
        )

        if response.status_code in _AUTH_STATUSES:
            raise AuthenticationRequiredException("Sign in again to submit the booking")
        if response.status_code >= 500:
            raise SubmissionTransportException(
                f"Booking service responded with {response.status_code}"
            )
        if response.is_error:
            raise SubmissionRejectedException(
                "Booking was rejected", errors=self._rejection_errors(response)
            )

        try:
            payload = response.json()
            # { "success": true, "booking": {...} } 形式も受け付ける
            model = BookingCreatedResponse.model_validate(payload.get("booking", payload))
        except (ValueError, AttributeError) as e:
            # 作成済みの可能性があるため通信エラーとして扱う
            logger.exception("Malformed booking creation response")
            raise SubmissionTransportException(
                "Booking service returned an unreadable response"
            ) from e

        logger.info("Booking created", booking_number=model.booking_number)
        return {"booking_number": model.booking_number, "status": model.status}

    async def cancel(
        self, booking_number: BookingNumber, identity: Identity, reason: str
    ) -> None:
        """PUT /bookings/{number}/cancel でキャンセルを依頼する"""
        if not reason.strip():
            raise BusinessRuleViolationException("A cancellation reason is required")
        body = CancelBookingRequest(reason=reason).to_payload()
        response = await self._send(
            "PUT", f"{self.base_url}/bookings/{booking_number}/cancel", identity, body
        )

        if response.status_code in _AUTH_STATUSES:
            raise AuthenticationRequiredException("Sign in again to cancel the booking")
        if response.status_code >= 500:
            raise SubmissionTransportException(
                f"Booking service responded with {response.status_code}"
            )
        if response.is_error:
            errors = self._rejection_errors(response)
            raise BusinessRuleViolationException(
                "; ".join(error.reason for error in errors)
            )
        logger.info("Booking cancelled", booking_number=str(booking_number))

    async def _send(
        self, method: str, url: str, identity: Identity, body: dict
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                return await client.request(
                    method, url, json=body, headers=identity.authorization_header()
                )
        except httpx.TimeoutException as e:
            logger.warning("Booking request timed out", url=url)
            raise SubmissionTransportException("Booking service timed out") from e
        except httpx.HTTPError as e:
            logger.warning("Booking request failed", url=url, reason=str(e))
            raise SubmissionTransportException(
                f"Booking service is unreachable: {e}"
            ) from e

    def _rejection_errors(self, response: httpx.Response) -> list[FieldError]:
        """拒否レスポンスをフィールドエラーに変換する"""
        try:
            model = RejectionResponse.model_validate(response.json())
        except ValueError:
            return [FieldError("booking", f"Rejected with {response.status_code}")]
        if not model.errors:
            return [FieldError("booking", model.message)]
        return [FieldError(detail.field, detail.reason) for detail in model.errors]
