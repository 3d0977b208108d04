import datetime as dt
from unittest.mock import AsyncMock

import pytest

from booking_engine.booking.infrastructure import InMemoryBookingRecordRepository
from booking_engine.payment.applications import PaymentDispatcher
from booking_engine.payment.domain import PaymentIntentFactory
from booking_engine.payment.infrastructure import InMemoryPaymentIntentRepository

NOW = dt.datetime(2024, 1, 15, 9, 0, tzinfo=dt.timezone.utc)


class FakeClock:
    """テスト用に時刻を進められる時計"""

    def __init__(self, now: dt.datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> dt.datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += dt.timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def payment_gateway():
    gateway = AsyncMock()
    gateway.initiate.return_value = {
        "payment_url": "https://pay.test/checkout/1",
        "provider_reference": "ref-1",
    }
    return gateway


@pytest.fixture
def intent_repository():
    return InMemoryPaymentIntentRepository()


@pytest.fixture
def booking_repository():
    return InMemoryBookingRecordRepository()


@pytest.fixture
def dispatcher(payment_gateway, intent_repository, booking_repository, clock):
    return PaymentDispatcher(
        gateway=payment_gateway,
        intent_repository=intent_repository,
        booking_repository=booking_repository,
        factory=PaymentIntentFactory(),
        callback_timeout=dt.timedelta(minutes=15),
        clock=clock,
    )


@pytest.fixture
def saved_record(create_record, booking_repository):
    record = create_record()
    booking_repository.save(record)
    return record
