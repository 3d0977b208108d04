from .booking_status_changed import BookingStatusChanged as BookingStatusChanged
from .draft_events import Abandon as Abandon
from .draft_events import AddLineItem as AddLineItem
from .draft_events import Advance as Advance
from .draft_events import AssignSlot as AssignSlot
from .draft_events import ChangeContact as ChangeContact
from .draft_events import ChangeLineItem as ChangeLineItem
from .draft_events import ChangeNotes as ChangeNotes
from .draft_events import ChangeOptions as ChangeOptions
from .draft_events import ChangeQuantity as ChangeQuantity
from .draft_events import ChangeSchedule as ChangeSchedule
from .draft_events import DraftEvent as DraftEvent
from .draft_events import GoBack as GoBack
from .draft_events import RemoveLineItem as RemoveLineItem
from .draft_events import SubmissionAccepted as SubmissionAccepted
from .draft_events import SubmissionRejected as SubmissionRejected
