from dataclasses import dataclass
from decimal import Decimal

from booking_engine.booking.domain.enum import BookingStep
from booking_engine.booking.domain.value_object import (
    Contact,
    LineItem,
    ScheduleSelection,
)
from booking_engine.pricing.domain import PricingOptions


@dataclass(frozen=True)
class ChangeSchedule:
    schedule: ScheduleSelection


@dataclass(frozen=True)
class ChangeContact:
    contact: Contact


@dataclass(frozen=True)
class ChangeLineItem:
    index: int
    item: LineItem


@dataclass(frozen=True)
class AddLineItem:
    item: LineItem | None = None


@dataclass(frozen=True)
class RemoveLineItem:
    index: int


@dataclass(frozen=True)
class AssignSlot:
    index: int
    slot_id: str | None


@dataclass(frozen=True)
class ChangeQuantity:
    quantity: Decimal


@dataclass(frozen=True)
class ChangeOptions:
    options: PricingOptions


@dataclass(frozen=True)
class ChangeNotes:
    notes: str


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class GoBack:
    """前のステップに戻る。target 未指定なら詳細入力ステップへ"""

    target: BookingStep | None = None


@dataclass(frozen=True)
class Abandon:
    pass


@dataclass(frozen=True)
class SubmissionAccepted:
    pass


@dataclass(frozen=True)
class SubmissionRejected:
    pass


DraftEvent = (
    ChangeSchedule
    | ChangeContact
    | ChangeLineItem
    | AddLineItem
    | RemoveLineItem
    | AssignSlot
    | ChangeQuantity
    | ChangeOptions
    | ChangeNotes
    | Advance
    | GoBack
    | Abandon
    | SubmissionAccepted
    | SubmissionRejected
)
