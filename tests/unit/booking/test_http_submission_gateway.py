import json

import httpx
import pytest

from booking_engine.booking.domain import BookingNumber
from booking_engine.booking.infrastructure import HttpSubmissionGateway
from booking_engine.shared.domain.exception import (
    AuthenticationRequiredException,
    BusinessRuleViolationException,
    SubmissionRejectedException,
    SubmissionTransportException,
)

BASE_URL = "https://booking.test"


def _gateway(handler) -> HttpSubmissionGateway:
    return HttpSubmissionGateway(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestCreate:
    @pytest.mark.asyncio
    async def test_success_returns_receipt(self, create_snapshot, identity):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                201, json={"bookingNumber": "KS2401150001", "status": "created"}
            )

        receipt = await _gateway(handler).create(create_snapshot(), identity)

        assert receipt == {"booking_number": "KS2401150001", "status": "created"}
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/bookings"
        assert request.headers["Authorization"] == "Bearer token-abc"
        body = json.loads(request.content)
        assert body["serviceId"] == "svc-kathmandu-pokhara"
        assert body["pricing"]["total"] == "1808.00"

    @pytest.mark.asyncio
    async def test_success_accepts_wrapped_payload(self, create_snapshot, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"success": True, "booking": {"bookingNumber": "KS2401150002"}}
            )

        receipt = await _gateway(handler).create(create_snapshot(), identity)

        assert receipt["booking_number"] == "KS2401150002"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 409, 422])
    async def test_rejection_carries_field_errors(
        self, create_snapshot, identity, status_code
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code,
                json={"errors": [{"field": "roster[0].slotId", "reason": "Seat taken"}]},
            )

        with pytest.raises(SubmissionRejectedException) as exc_info:
            await _gateway(handler).create(create_snapshot(), identity)

        errors = exc_info.value.errors
        assert [(error.field, error.reason) for error in errors] == [
            ("roster[0].slotId", "Seat taken")
        ]

    @pytest.mark.asyncio
    async def test_rejection_without_field_errors_uses_message(
        self, create_snapshot, identity
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"success": False, "message": "Bus is full"})

        with pytest.raises(SubmissionRejectedException) as exc_info:
            await _gateway(handler).create(create_snapshot(), identity)

        assert exc_info.value.errors[0].reason == "Bus is full"

    @pytest.mark.asyncio
    async def test_rejection_with_unreadable_body(self, create_snapshot, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text="bad request")

        with pytest.raises(SubmissionRejectedException) as exc_info:
            await _gateway(handler).create(create_snapshot(), identity)

        assert exc_info.value.errors[0].field == "booking"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_auth_failure(self, create_snapshot, identity, status_code):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code)

        with pytest.raises(AuthenticationRequiredException):
            await _gateway(handler).create(create_snapshot(), identity)

    @pytest.mark.asyncio
    async def test_server_error_is_transport_error(self, create_snapshot, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502)

        with pytest.raises(SubmissionTransportException):
            await _gateway(handler).create(create_snapshot(), identity)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self, create_snapshot, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SubmissionTransportException, match="timed out"):
            await _gateway(handler).create(create_snapshot(), identity)

    @pytest.mark.asyncio
    async def test_malformed_success_is_transport_error(self, create_snapshot, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "created"})

        with pytest.raises(SubmissionTransportException):
            await _gateway(handler).create(create_snapshot(), identity)


class TestCancel:
    @pytest.mark.asyncio
    async def test_cancel_sends_reason(self, identity):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        await _gateway(handler).cancel(
            BookingNumber("KS2401150001"), identity, "Change of plans"
        )

        request = requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE_URL}/bookings/KS2401150001/cancel"
        assert json.loads(request.content) == {"reason": "Change of plans"}

    @pytest.mark.asyncio
    async def test_cancel_refused(self, identity):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                409, json={"message": "Booking already departed", "errors": []}
            )

        with pytest.raises(BusinessRuleViolationException, match="already departed"):
            await _gateway(handler).cancel(BookingNumber("KS1"), identity, "late")

    @pytest.mark.asyncio
    async def test_cancel_without_reason_is_not_sent(self, identity):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        with pytest.raises(BusinessRuleViolationException, match="reason is required"):
            await _gateway(handler).cancel(BookingNumber("KS1"), identity, "")

        assert requests == []
