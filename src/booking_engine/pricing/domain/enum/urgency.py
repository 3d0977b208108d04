from decimal import Decimal
from enum import Enum


class Urgency(str, Enum):
    """緊急度（課税前の基本料金に倍率を掛ける）"""

    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    URGENT = "URGENT"

    @property
    def multiplier(self) -> Decimal:
        return _MULTIPLIERS[self]


_MULTIPLIERS: dict[Urgency, Decimal] = {
    Urgency.STANDARD: Decimal("1"),
    Urgency.EXPRESS: Decimal("1.5"),
    Urgency.URGENT: Decimal("2"),
}
