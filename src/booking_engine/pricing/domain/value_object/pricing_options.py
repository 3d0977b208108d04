from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from booking_engine.pricing.domain.enum import Urgency


@dataclass(frozen=True)
class PromotionalDiscount:
    """プロモーション割引（定率または定額のどちらか一方）"""

    code: str
    percent: Decimal | None = None
    amount: Decimal | None = None

    def __post_init__(self) -> None:
        if (self.percent is None) == (self.amount is None):
            raise ValueError("Exactly one of percent or amount must be given")
        if self.percent is not None and not (0 <= self.percent <= 100):
            raise ValueError(f"Discount percent out of range: {self.percent}")
        if self.amount is not None and self.amount < 0:
            raise ValueError(f"Discount amount cannot be negative: {self.amount}")

    def apply_to(self, subtotal: Decimal) -> Decimal:
        """割引額を計算する（小計を超える場合もそのまま返す）"""
        if self.percent is not None:
            return subtotal * self.percent / Decimal("100")
        assert self.amount is not None
        return self.amount


@dataclass(frozen=True)
class PricingOptions:
    """料金計算のオプション"""

    urgency: Urgency = Urgency.STANDARD
    add_ons: tuple[str, ...] = ()
    discount: PromotionalDiscount | None = None
