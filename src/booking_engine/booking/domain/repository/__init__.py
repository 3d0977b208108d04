from .booking_record_repository import (
    BookingRecordRepository as BookingRecordRepository,
)
