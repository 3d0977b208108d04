from dataclasses import dataclass

from booking_engine.booking.domain.enum import BookingStatus
from booking_engine.booking.domain.value_object import BookingNumber


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが変化したことを表すドメインイベント"""

    booking_number: BookingNumber
    previous: BookingStatus
    current: BookingStatus
