from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AddOn:
    """予約単位で加算される追加サービス（定額）"""

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Add-on name cannot be empty")
        if self.price < 0:
            raise ValueError(f"Add-on price cannot be negative: {self.price}")
