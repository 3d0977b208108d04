"""予約下書きの遷移関数

apply(draft, event) -> TransitionResult の形で、UI から独立してテストできる。
エラーがある場合は下書きを変更せず、フィールド単位のエラー一覧を返す。
"""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

from booking_engine.booking.domain.entity import BookingDraft, BookingSnapshot
from booking_engine.booking.domain.enum import BookingStep
from booking_engine.booking.domain.event import (
    Abandon,
    AddLineItem,
    Advance,
    AssignSlot,
    ChangeContact,
    ChangeLineItem,
    ChangeNotes,
    ChangeOptions,
    ChangeQuantity,
    ChangeSchedule,
    DraftEvent,
    GoBack,
    RemoveLineItem,
    SubmissionAccepted,
    SubmissionRejected,
)
from booking_engine.booking.domain.service.draft_validation import (
    validate_contact,
    validate_details,
)
from booking_engine.booking.domain.service.roster import (
    add_line_item,
    assign_slot,
    remove_line_item,
    update_line_item,
)
from booking_engine.booking.domain.value_object import TransitionResult
from booking_engine.shared.domain import FieldError

_EDITABLE_CONTACT_STEPS = (BookingStep.COLLECTING_DETAILS, BookingStep.COLLECTING_CONTACT)


def apply(draft: BookingDraft, event: DraftEvent) -> TransitionResult:
    """イベントを下書きに適用する"""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported draft event: {type(event).__name__}")
    return handler(draft, event)


def _change_schedule(draft: BookingDraft, event: ChangeSchedule) -> TransitionResult:
    if (error := _require_details_step(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    return TransitionResult(draft=draft.revise(schedule=event.schedule))


def _change_contact(draft: BookingDraft, event: ChangeContact) -> TransitionResult:
    if draft.step not in _EDITABLE_CONTACT_STEPS:
        return TransitionResult.rejected(draft, _locked())
    return TransitionResult(draft=draft.revise(contact=event.contact))


def _change_notes(draft: BookingDraft, event: ChangeNotes) -> TransitionResult:
    if draft.step not in _EDITABLE_CONTACT_STEPS:
        return TransitionResult.rejected(draft, _locked())
    return TransitionResult(draft=draft.revise(notes=event.notes))


def _change_quantity(draft: BookingDraft, event: ChangeQuantity) -> TransitionResult:
    if (error := _require_details_step(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    if draft.offering.kind.uses_roster:
        return TransitionResult.rejected(
            draft, FieldError("quantity", "Quantity follows the number of travellers")
        )
    quantity = event.quantity
    valid = (
        isinstance(quantity, (int, Decimal))
        and not isinstance(quantity, bool)
        and Decimal(quantity).is_finite()
    )
    if not valid or quantity <= 0:
        return TransitionResult.rejected(
            draft, FieldError("quantity", "Quantity must be greater than zero")
        )
    return TransitionResult(draft=draft.revise(quantity=Decimal(quantity)))


def _change_options(draft: BookingDraft, event: ChangeOptions) -> TransitionResult:
    if (error := _require_details_step(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    unknown = [
        name for name in event.options.add_ons if draft.offering.find_add_on(name) is None
    ]
    if unknown:
        return TransitionResult.rejected(
            draft,
            *(FieldError("options.add_ons", f"Unknown add-on: {name}") for name in unknown),
        )
    return TransitionResult(draft=draft.revise(options=event.options))


def _advance(draft: BookingDraft, event: Advance) -> TransitionResult:
    if draft.step == BookingStep.COLLECTING_DETAILS:
        errors = validate_details(draft)
        if errors:
            return TransitionResult.rejected(draft, *errors)
        return TransitionResult(draft=draft.revise(step=BookingStep.COLLECTING_CONTACT))

    if draft.step == BookingStep.COLLECTING_CONTACT:
        errors = validate_details(draft) + validate_contact(draft.contact)
        if errors:
            return TransitionResult.rejected(draft, *errors)
        snapshot = BookingSnapshot.capture(draft)
        return TransitionResult(
            draft=draft.revise(step=BookingStep.AWAITING_PAYMENT, snapshot=snapshot)
        )

    if draft.step == BookingStep.AWAITING_PAYMENT:
        return TransitionResult.rejected(
            draft, FieldError("step", "Submit the booking to continue")
        )
    return TransitionResult.rejected(draft, _finished(draft))


def _go_back(draft: BookingDraft, event: GoBack) -> TransitionResult:
    if draft.step.is_terminal:
        return TransitionResult.rejected(draft, _finished(draft))

    # 決済待ちから戻る場合もスナップショットを破棄して詳細入力へ
    target = event.target or BookingStep.COLLECTING_DETAILS
    if draft.step == BookingStep.COLLECTING_DETAILS:
        return TransitionResult.rejected(
            draft, FieldError("step", "Already on the first step")
        )

    if target.is_terminal or target.order >= draft.step.order:
        return TransitionResult.rejected(
            draft, FieldError("step", f"Cannot go back to {target.value}")
        )
    return TransitionResult(draft=draft.revise(step=target, snapshot=None))


def _abandon(draft: BookingDraft, event: Abandon) -> TransitionResult:
    if draft.step.is_terminal:
        return TransitionResult.rejected(draft, _finished(draft))
    return TransitionResult(draft=draft.revise(step=BookingStep.ABANDONED, snapshot=None))


def _submission_accepted(
    draft: BookingDraft, event: SubmissionAccepted
) -> TransitionResult:
    if draft.step != BookingStep.AWAITING_PAYMENT or draft.snapshot is None:
        return TransitionResult.rejected(
            draft, FieldError("step", "No booking is waiting to be submitted")
        )
    return TransitionResult(draft=draft.revise(step=BookingStep.SUBMITTED))


def _submission_rejected(
    draft: BookingDraft, event: SubmissionRejected
) -> TransitionResult:
    if draft.step != BookingStep.AWAITING_PAYMENT:
        return TransitionResult.rejected(
            draft, FieldError("step", "No booking is waiting to be submitted")
        )
    return TransitionResult(
        draft=draft.revise(step=BookingStep.COLLECTING_DETAILS, snapshot=None)
    )


def _require_details_step(draft: BookingDraft) -> FieldError | None:
    if draft.step != BookingStep.COLLECTING_DETAILS:
        return _locked()
    return None


def _locked() -> FieldError:
    return FieldError("step", "Booking details can no longer be changed on this step")


def _finished(draft: BookingDraft) -> FieldError:
    return FieldError("step", f"Booking flow is already {draft.step.value.lower()}")


_HANDLERS: dict[type, Callable[[BookingDraft, Any], TransitionResult]] = {
    ChangeSchedule: _change_schedule,
    ChangeContact: _change_contact,
    ChangeNotes: _change_notes,
    ChangeQuantity: _change_quantity,
    ChangeOptions: _change_options,
    ChangeLineItem: lambda draft, event: update_line_item(draft, event.index, event.item),
    AddLineItem: lambda draft, event: add_line_item(draft, event.item),
    RemoveLineItem: lambda draft, event: remove_line_item(draft, event.index),
    AssignSlot: lambda draft, event: assign_slot(draft, event.index, event.slot_id),
    Advance: _advance,
    GoBack: _go_back,
    Abandon: _abandon,
    SubmissionAccepted: _submission_accepted,
    SubmissionRejected: _submission_rejected,
}
