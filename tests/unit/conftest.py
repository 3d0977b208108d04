import datetime as dt
from decimal import Decimal

import pytest
import structlog

from booking_engine.booking.domain import (
    BookingNumber,
    BookingRecord,
    BookingSnapshot,
    BookingStatus,
    Contact,
    LineItem,
    ScheduleSelection,
)
from booking_engine.catalog.domain import (
    AddOn,
    ScheduleOption,
    ServiceId,
    ServiceKind,
    ServiceOffering,
    TaxRule,
)
from booking_engine.pricing.domain import PricingOptions, compute_pricing
from booking_engine.shared.domain import Currency, Identity, Money

TRAVEL_DATE = dt.date(2024, 1, 15)


@pytest.fixture(autouse=True)
def reset_structlog():
    """configure_logging によるグローバル設定をテストごとに元に戻す"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def travel_date():
    """全テスト共通の出発日"""
    return TRAVEL_DATE


@pytest.fixture
def identity():
    return Identity(user_id="user-1", access_token="token-abc")


@pytest.fixture
def create_offering():
    """ServiceOffering を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        kind: ServiceKind = ServiceKind.SEAT_TRANSPORT,
        service_id: str = "svc-kathmandu-pokhara",
        base_price: Decimal = Decimal("800"),
        tax_rules: tuple[TaxRule, ...] = (TaxRule.vat(),),
        schedule_options: tuple[ScheduleOption, ...] | None = None,
        max_roster_size: int = 6,
        add_ons: tuple[AddOn, ...] = (),
    ) -> ServiceOffering:
        if schedule_options is None:
            schedule_options = (
                ScheduleOption(
                    date=TRAVEL_DATE,
                    time_slots=("07:00", "13:00"),
                    boarding_points=("Kalanki", "Gongabu"),
                    dropping_points=("Lakeside",),
                ),
                ScheduleOption(date=TRAVEL_DATE + dt.timedelta(days=1)),
            )
        return ServiceOffering(
            id=ServiceId(service_id),
            kind=kind,
            name="Kathmandu - Pokhara",
            base_price=Money(amount=base_price, currency=Currency.npr()),
            tax_rules=tax_rules,
            schedule_options=schedule_options,
            max_roster_size=max_roster_size,
            add_ons=add_ons,
        )

    return _factory


@pytest.fixture
def create_snapshot(create_offering):
    """BookingSnapshot を生成する Factory fixture"""

    def _factory(
        travellers: int = 2, offering: ServiceOffering | None = None
    ) -> BookingSnapshot:
        offering = offering or create_offering()
        options = PricingOptions()
        return BookingSnapshot(
            service_id=offering.id,
            kind=offering.kind,
            schedule=ScheduleSelection(
                date=TRAVEL_DATE,
                time_slot="07:00",
                boarding_point="Kalanki",
                dropping_point="Lakeside",
            ),
            roster=tuple(LineItem(name=f"Traveller {i + 1}") for i in range(travellers)),
            quantity=None,
            contact=Contact(
                name="Sita Sharma", phone="+977 9800000000", email="sita@example.com"
            ),
            options=options,
            notes="",
            pricing=compute_pricing(offering, travellers, options),
        )

    return _factory


@pytest.fixture
def create_record(create_snapshot):
    """BookingRecord を生成する Factory fixture"""

    def _factory(
        status: BookingStatus = BookingStatus.CREATED,
        booking_number: str = "KS2401150001",
        travellers: int = 2,
    ) -> BookingRecord:
        return BookingRecord(
            id=BookingNumber(booking_number),
            snapshot=create_snapshot(travellers=travellers),
            status=status,
        )

    return _factory
