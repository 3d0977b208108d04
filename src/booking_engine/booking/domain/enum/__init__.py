from .booking_status import BookingStatus as BookingStatus
from .booking_step import BookingStep as BookingStep
