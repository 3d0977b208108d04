import datetime as dt
from decimal import Decimal

from pydantic import Field

from booking_engine.booking.domain import BookingSnapshot
from booking_engine.shared.utils import WireModel


class ScheduleModel(WireModel):
    date: dt.date
    time_slot: str | None = None
    boarding_point: str | None = None
    dropping_point: str | None = None


class LineItemModel(WireModel):
    name: str
    age: int | None = None
    category: str = "adult"
    slot_id: str | None = None


class ContactModel(WireModel):
    name: str
    phone: str
    email: str
    alternate_phone: str | None = None


class TaxLineModel(WireModel):
    name: str
    rate_percent: Decimal
    amount: Decimal


class AddOnLineModel(WireModel):
    name: str
    amount: Decimal


class PricingModel(WireModel):
    currency: str = Field(..., pattern="^[A-Z]{3}$")
    base: Decimal
    urgency: str
    urgency_multiplier: Decimal
    add_ons: list[AddOnLineModel] = Field(default_factory=list)
    taxes: list[TaxLineModel] = Field(default_factory=list)
    promo_code: str | None = None
    discount: Decimal
    total: Decimal


class BookingCreationRequest(WireModel):
    """予約作成リクエストモデル"""

    service_id: str = Field(..., min_length=1)
    kind: str
    schedule: ScheduleModel
    roster: list[LineItemModel] | None = None
    quantity: Decimal | None = Field(default=None, gt=0)
    contact: ContactModel
    pricing: PricingModel
    notes: str = ""

    @classmethod
    def from_snapshot(cls, snapshot: BookingSnapshot) -> "BookingCreationRequest":
        """スナップショットからリクエストを組み立てる"""
        if snapshot.schedule.date is None:
            raise ValueError("Snapshot has no travel date")
        pricing = snapshot.pricing
        discount = snapshot.options.discount
        return cls(
            service_id=str(snapshot.service_id),
            kind=snapshot.kind.value,
            schedule=ScheduleModel(
                date=snapshot.schedule.date,
                time_slot=snapshot.schedule.time_slot,
                boarding_point=snapshot.schedule.boarding_point,
                dropping_point=snapshot.schedule.dropping_point,
            ),
            roster=(
                [
                    LineItemModel(
                        name=item.name,
                        age=item.age,
                        category=item.category,
                        slot_id=item.slot_id,
                    )
                    for item in snapshot.roster
                ]
                if snapshot.kind.uses_roster
                else None
            ),
            quantity=snapshot.quantity,
            contact=ContactModel(
                name=snapshot.contact.name,
                phone=snapshot.contact.phone,
                email=snapshot.contact.email,
                alternate_phone=snapshot.contact.alternate_phone or None,
            ),
            pricing=PricingModel(
                currency=str(pricing.currency),
                base=pricing.base,
                urgency=snapshot.options.urgency.value,
                urgency_multiplier=pricing.urgency_multiplier,
                add_ons=[
                    AddOnLineModel(name=line.name, amount=line.amount)
                    for line in pricing.add_ons
                ],
                taxes=[
                    TaxLineModel(
                        name=line.name,
                        rate_percent=line.rate_percent,
                        amount=line.amount,
                    )
                    for line in pricing.taxes
                ],
                promo_code=discount.code if discount else None,
                discount=pricing.discount,
                total=pricing.total,
            ),
            notes=snapshot.notes,
        )


class CancelBookingRequest(WireModel):
    """予約キャンセルリクエストモデル"""

    reason: str = Field(..., min_length=1)
