from booking_engine.booking.domain import BookingNumber, BookingRecord
from booking_engine.booking.domain.repository import BookingRecordRepository
from booking_engine.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class InMemoryBookingRecordRepository(BookingRecordRepository):
    """プロセス内メモリを使用した BookingRecordRepository の具象実装"""

    def __init__(self) -> None:
        self._records: dict[str, BookingRecord] = {}

    def save(self, record: BookingRecord) -> None:
        key = str(record.booking_number)
        if key in self._records:
            raise DuplicateResourceException(f"Booking already exists: {key}")
        self._records[key] = record

    def find_by_id(self, booking_number: BookingNumber) -> BookingRecord | None:
        return self._records.get(str(booking_number))

    def update(self, record: BookingRecord) -> None:
        key = str(record.booking_number)
        if key not in self._records:
            raise ResourceNotFoundException(f"Booking not found: {key}")
        self._records[key] = record
