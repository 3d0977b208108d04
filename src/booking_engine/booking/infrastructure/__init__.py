from .http_submission_gateway import HttpSubmissionGateway as HttpSubmissionGateway
from .in_memory_booking_record_repository import (
    InMemoryBookingRecordRepository as InMemoryBookingRecordRepository,
)
