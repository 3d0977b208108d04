from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def quantized(self) -> Money:
        """小数点以下2桁に丸めた Money を返す"""
        return Money(quantize(self.amount), self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)

    @classmethod
    def npr(cls, amount: Decimal | int | str) -> Money:
        """ネパール・ルピーで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.npr())


def quantize(amount: Decimal) -> Decimal:
    """金額を 0.01 単位に四捨五入する"""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
