import datetime as dt
import json

import httpx
import pytest

from booking_engine.booking.domain import BookingNumber
from booking_engine.payment.domain import (
    CorrelationToken,
    PaymentIntent,
    PaymentProvider,
)
from booking_engine.payment.infrastructure import HttpPaymentGateway
from booking_engine.shared.domain import Money
from booking_engine.shared.domain.exception import PaymentFailedException

BASE_URL = "https://payment.test"


@pytest.fixture
def intent():
    return PaymentIntent(
        id=CorrelationToken("token-1"),
        booking_number=BookingNumber("KS2401150001"),
        provider=PaymentProvider.KHALTI,
        amount=Money.npr("1808.00"),
        expires_at=dt.datetime(2024, 1, 15, 9, 15, tzinfo=dt.timezone.utc),
    )


def _gateway(handler) -> HttpPaymentGateway:
    return HttpPaymentGateway(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestHttpPaymentGateway:
    @pytest.mark.asyncio
    async def test_initiate_posts_intent(self, intent):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={"paymentUrl": "https://khalti.test/pay/1", "providerReference": "px-1"},
            )

        checkout = await _gateway(handler).initiate(intent)

        assert checkout == {
            "payment_url": "https://khalti.test/pay/1",
            "provider_reference": "px-1",
        }
        request = requests[0]
        assert str(request.url) == f"{BASE_URL}/payments/initiate"
        assert json.loads(request.content) == {
            "bookingNumber": "KS2401150001",
            "amount": "1808.00",
            "currency": "NPR",
            "providerId": "KHALTI",
            "correlationToken": "token-1",
        }

    @pytest.mark.asyncio
    async def test_cash_has_no_payment_url(self, intent):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        checkout = await _gateway(handler).initiate(intent)

        assert checkout == {"payment_url": None, "provider_reference": None}

    @pytest.mark.asyncio
    async def test_declined(self, intent):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(402, json={"message": "declined"})

        with pytest.raises(PaymentFailedException) as exc_info:
            await _gateway(handler).initiate(intent)

        assert exc_info.value.booking_number == "KS2401150001"

    @pytest.mark.asyncio
    async def test_timeout(self, intent):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(PaymentFailedException, match="unreachable"):
            await _gateway(handler).initiate(intent)

    @pytest.mark.asyncio
    async def test_unreadable_response(self, intent):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(PaymentFailedException):
            await _gateway(handler).initiate(intent)
