from enum import Enum


class PaymentProvider(str, Enum):
    """決済プロバイダ"""

    KHALTI = "KHALTI"
    ESEWA = "ESEWA"
    CASH = "CASH"  # 代金引換

    @classmethod
    def parse(cls, value: str) -> "PaymentProvider":
        """大文字小文字を区別せずにプロバイダを解決する"""
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            raise ValueError(f"Unknown payment provider: {value}") from e
