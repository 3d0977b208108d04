from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from booking_engine.booking.domain.value_object import (
    Contact,
    LineItem,
    ScheduleSelection,
)
from booking_engine.catalog.domain import ServiceId, ServiceKind
from booking_engine.pricing.domain import (
    PricingBreakdown,
    PricingOptions,
    compute_pricing,
)
from booking_engine.shared.domain.exception import BusinessRuleViolationException

if TYPE_CHECKING:
    from booking_engine.booking.domain.entity.booking_draft import BookingDraft


@dataclass(frozen=True)
class BookingSnapshot:
    """送信用に凍結した下書きの写し

    すべてのフィールドが不変なので、元の下書きを後から変更しても影響を受けない。
    """

    service_id: ServiceId
    kind: ServiceKind
    schedule: ScheduleSelection
    roster: tuple[LineItem, ...]
    quantity: Decimal | None
    contact: Contact
    options: PricingOptions
    notes: str
    pricing: PricingBreakdown

    @classmethod
    def capture(cls, draft: BookingDraft) -> BookingSnapshot:
        """下書きからスナップショットを作る

        表示中の料金が再計算結果と一致しない下書きは送信させない。
        """
        fresh = compute_pricing(draft.offering, draft.pricing_quantity, draft.options)
        if fresh != draft.pricing:
            raise BusinessRuleViolationException(
                "Displayed pricing does not match a fresh recomputation"
            )
        return cls(
            service_id=draft.offering.id,
            kind=draft.offering.kind,
            schedule=draft.schedule,
            roster=draft.roster,
            quantity=draft.quantity,
            contact=draft.contact,
            options=draft.options,
            notes=draft.notes,
            pricing=fresh,
        )
