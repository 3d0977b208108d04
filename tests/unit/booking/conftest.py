import pytest

from booking_engine.booking.domain import (
    BookingDraft,
    BookingStep,
    Contact,
    LineItem,
    ScheduleSelection,
)
from booking_engine.booking.domain.event import Advance
from booking_engine.booking.domain.service import apply


@pytest.fixture
def valid_contact():
    return Contact(name="Sita Sharma", phone="+977 9800000000", email="sita@example.com")


@pytest.fixture
def create_draft(create_offering, travel_date):
    """詳細入力を済ませた BookingDraft を生成する Factory fixture"""

    def _factory(
        names: tuple[str, ...] = ("Ram", "Sita"),
        offering=None,
        schedule: ScheduleSelection | None = None,
    ) -> BookingDraft:
        offering = offering or create_offering()
        draft = BookingDraft.seed(offering)
        changes = {
            "schedule": schedule
            or ScheduleSelection(
                date=travel_date,
                time_slot="07:00",
                boarding_point="Kalanki",
                dropping_point="Lakeside",
            )
        }
        if offering.kind.uses_roster:
            changes["roster"] = tuple(LineItem(name=name) for name in names)
        return draft.revise(**changes)

    return _factory


@pytest.fixture
def awaiting_payment_draft(create_draft, valid_contact):
    """決済待ちまで進めた BookingDraft を生成する Factory fixture"""

    def _factory(**kwargs) -> BookingDraft:
        draft = create_draft(**kwargs).revise(contact=valid_contact)
        draft = apply(draft, Advance()).draft
        draft = apply(draft, Advance()).draft
        assert draft.step == BookingStep.AWAITING_PAYMENT
        return draft

    return _factory
