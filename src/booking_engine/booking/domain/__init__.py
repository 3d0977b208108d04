from .entity import BookingDraft as BookingDraft
from .entity import BookingRecord as BookingRecord
from .entity import BookingSnapshot as BookingSnapshot
from .enum import BookingStatus as BookingStatus
from .enum import BookingStep as BookingStep
from .factory import BookingRecordFactory as BookingRecordFactory
from .factory import CreationReceipt as CreationReceipt
from .gateway import SubmissionGateway as SubmissionGateway
from .repository import BookingRecordRepository as BookingRecordRepository
from .value_object import BookingNumber as BookingNumber
from .value_object import Contact as Contact
from .value_object import LineItem as LineItem
from .value_object import ScheduleSelection as ScheduleSelection
from .value_object import TransitionResult as TransitionResult
