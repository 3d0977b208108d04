from .booking_wizard import BookingWizard as BookingWizard
from .submit_booking import SubmitBookingService as SubmitBookingService
