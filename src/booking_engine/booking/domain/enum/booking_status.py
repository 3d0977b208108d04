from enum import Enum


class BookingStatus(str, Enum):
    """予約レコードのステータス"""

    CREATED = "CREATED"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    PAID = "PAID"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.PAID, BookingStatus.CANCELLED)
