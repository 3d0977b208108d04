from .draft_validation import validate_contact as validate_contact
from .draft_validation import validate_details as validate_details
from .roster import add_line_item as add_line_item
from .roster import assign_slot as assign_slot
from .roster import remove_line_item as remove_line_item
from .roster import update_line_item as update_line_item
from .transitions import apply as apply
