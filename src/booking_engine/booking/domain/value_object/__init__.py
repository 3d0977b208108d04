from .booking_number import BookingNumber as BookingNumber
from .contact import Contact as Contact
from .line_item import LineItem as LineItem
from .schedule_selection import ScheduleSelection as ScheduleSelection
from .transition_result import TransitionResult as TransitionResult
