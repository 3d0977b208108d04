from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from booking_engine.booking.domain.enum import BookingStep
from booking_engine.booking.domain.value_object import (
    Contact,
    LineItem,
    ScheduleSelection,
)
from booking_engine.catalog.domain import ServiceOffering
from booking_engine.pricing.domain import (
    PricingBreakdown,
    PricingOptions,
    compute_pricing,
)

if TYPE_CHECKING:
    from booking_engine.booking.domain.entity.booking_snapshot import BookingSnapshot


@dataclass(frozen=True)
class BookingDraft:
    """入力途中の予約（集約ルート）

    不変オブジェクトとして扱い、変更は revise() で新しい下書きを作る。
    料金内訳は revise() のたびに名簿・数量・オプションから再計算され、
    手で書き換えられることはない。
    """

    offering: ServiceOffering
    step: BookingStep
    contact: Contact
    schedule: ScheduleSelection
    roster: tuple[LineItem, ...]
    quantity: Decimal | None
    options: PricingOptions
    notes: str
    pricing: PricingBreakdown
    snapshot: BookingSnapshot | None = None

    def __post_init__(self) -> None:
        if self.offering.kind.uses_roster:
            if not self.roster:
                raise ValueError("Roster must hold at least one line item")
            if len(self.roster) > self.offering.max_roster_size:
                raise ValueError("Roster exceeds the offering's maximum size")
            if self.quantity is not None:
                raise ValueError("Roster-based bookings do not carry a quantity")
        else:
            if self.roster:
                raise ValueError("Cargo bookings do not carry a roster")
            if self.quantity is None or self.quantity <= 0:
                raise ValueError("Cargo bookings require a positive quantity")

        slots = [item.slot_id for item in self.roster if item.slot_id]
        if len(slots) != len(set(slots)):
            raise ValueError("Slot assignments must be unique within the roster")

        expected = compute_pricing(self.offering, self.pricing_quantity, self.options)
        if self.pricing != expected:
            raise ValueError("Pricing is out of sync with the draft")

    @classmethod
    def seed(
        cls, offering: ServiceOffering, contact: Contact | None = None
    ) -> BookingDraft:
        """サービス定義から初期状態の下書きを作る"""
        if offering.kind.uses_roster:
            roster: tuple[LineItem, ...] = (LineItem(),)
            quantity = None
            pricing_quantity: int | Decimal = 1
        else:
            roster = ()
            quantity = Decimal("1")
            pricing_quantity = quantity

        options = PricingOptions()
        schedule = ScheduleSelection()
        if len(offering.schedule_options) == 1:
            # 選択肢が1つしかない場合は日付を事前選択する
            only = offering.schedule_options[0]
            schedule = ScheduleSelection(
                date=only.date,
                time_slot=only.time_slots[0] if len(only.time_slots) == 1 else None,
            )

        return cls(
            offering=offering,
            step=BookingStep.COLLECTING_DETAILS,
            contact=contact or Contact(),
            schedule=schedule,
            roster=roster,
            quantity=quantity,
            options=options,
            notes="",
            pricing=compute_pricing(offering, pricing_quantity, options),
        )

    @property
    def pricing_quantity(self) -> int | Decimal:
        """料金計算に使う数量（名簿の人数、または貨物の数量）"""
        if self.offering.kind.uses_roster:
            return len(self.roster)
        assert self.quantity is not None
        return self.quantity

    @property
    def is_frozen(self) -> bool:
        """スナップショット作成後は名簿・連絡先を変更できない"""
        return self.step.order >= BookingStep.AWAITING_PAYMENT.order

    def revise(self, **changes: Any) -> BookingDraft:
        """変更を適用し、料金内訳を再計算した新しい下書きを返す"""
        if "pricing" in changes:
            raise ValueError("Pricing is derived and cannot be set directly")
        offering: ServiceOffering = changes.get("offering", self.offering)
        options: PricingOptions = changes.get("options", self.options)
        if offering.kind.uses_roster:
            quantity: int | Decimal = len(changes.get("roster", self.roster))
        else:
            quantity = changes.get("quantity", self.quantity)
        pricing = compute_pricing(offering, quantity, options)
        return dataclasses.replace(self, **changes, pricing=pricing)
