from enum import Enum


class PaymentOutcome(str, Enum):
    """決済結果"""

    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    @property
    def is_final(self) -> bool:
        return self != PaymentOutcome.PENDING
