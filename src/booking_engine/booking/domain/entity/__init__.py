from .booking_draft import BookingDraft as BookingDraft
from .booking_record import BookingRecord as BookingRecord
from .booking_snapshot import BookingSnapshot as BookingSnapshot
