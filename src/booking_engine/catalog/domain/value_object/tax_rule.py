from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TaxRule:
    """名前付きの税率（パーセント）

    税率 0 のルールも表示用に保持する。
    """

    name: str
    rate_percent: Decimal

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tax rule name cannot be empty")
        if self.rate_percent < 0:
            raise ValueError(f"Tax rate cannot be negative: {self.rate_percent}")

    @classmethod
    def vat(cls, rate_percent: Decimal = Decimal("13")) -> "TaxRule":
        return cls(name="VAT", rate_percent=rate_percent)
