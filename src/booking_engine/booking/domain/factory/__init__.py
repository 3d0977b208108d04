from .booking_record_factory import BookingRecordFactory as BookingRecordFactory
from .booking_record_factory import CreationReceipt as CreationReceipt
