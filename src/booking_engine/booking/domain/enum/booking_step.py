from enum import Enum


class BookingStep(str, Enum):
    """予約ウィザードのステップ"""

    COLLECTING_DETAILS = "COLLECTING_DETAILS"
    COLLECTING_CONTACT = "COLLECTING_CONTACT"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    SUBMITTED = "SUBMITTED"
    ABANDONED = "ABANDONED"

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStep.SUBMITTED, BookingStep.ABANDONED)

    @property
    def order(self) -> int:
        return _ORDER[self]

    def next(self) -> "BookingStep":
        return _NEXT[self]


_ORDER: dict[BookingStep, int] = {
    BookingStep.COLLECTING_DETAILS: 0,
    BookingStep.COLLECTING_CONTACT: 1,
    BookingStep.AWAITING_PAYMENT: 2,
    BookingStep.SUBMITTED: 3,
    BookingStep.ABANDONED: 3,
}

_NEXT: dict[BookingStep, BookingStep] = {
    BookingStep.COLLECTING_DETAILS: BookingStep.COLLECTING_CONTACT,
    BookingStep.COLLECTING_CONTACT: BookingStep.AWAITING_PAYMENT,
    BookingStep.AWAITING_PAYMENT: BookingStep.SUBMITTED,
}
