from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from booking_engine.shared.domain import Currency, Money


@dataclass(frozen=True)
class TaxLine:
    """税目ごとの内訳"""

    name: str
    rate_percent: Decimal
    amount: Decimal


@dataclass(frozen=True)
class AddOnLine:
    """追加サービスの内訳"""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class PricingBreakdown:
    """料金内訳

    下書きから導出される値。常に丸ごと再計算され、部分更新されない。
    total_floored は割引が小計を上回り合計を 0 に切り上げたことを示す。
    """

    currency: Currency
    base: Decimal
    urgency_multiplier: Decimal
    add_ons: tuple[AddOnLine, ...]
    taxes: tuple[TaxLine, ...]
    discount: Decimal
    total: Decimal
    total_floored: bool = False

    @property
    def tax_total(self) -> Decimal:
        return sum((line.amount for line in self.taxes), Decimal("0"))

    @property
    def add_on_total(self) -> Decimal:
        return sum((line.amount for line in self.add_ons), Decimal("0"))

    def tax(self, name: str) -> Decimal | None:
        for line in self.taxes:
            if line.name == name:
                return line.amount
        return None

    def total_money(self) -> Money:
        return Money(amount=self.total, currency=self.currency)
