import re

from pydantic import EmailStr, TypeAdapter, ValidationError

from booking_engine.booking.domain.entity import BookingDraft
from booking_engine.booking.domain.value_object import Contact
from booking_engine.shared.domain import FieldError

PHONE_PATTERN = re.compile(r"^\+?[\d\s-]{7,20}$")

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


def validate_details(draft: BookingDraft) -> list[FieldError]:
    """詳細入力ステップの必須項目を検証する"""
    errors: list[FieldError] = []
    schedule = draft.schedule

    if schedule.date is None:
        errors.append(FieldError("schedule.date", "Select a travel date"))
    elif draft.offering.schedule_options:
        option = draft.offering.schedule_for(schedule.date)
        if option is None:
            errors.append(
                FieldError("schedule.date", f"No departures on {schedule.date.isoformat()}")
            )
        else:
            if option.time_slots and not schedule.time_slot:
                errors.append(FieldError("schedule.time_slot", "Select a time slot"))
            elif schedule.time_slot and not option.offers_slot(schedule.time_slot):
                errors.append(
                    FieldError(
                        "schedule.time_slot",
                        f"Time slot {schedule.time_slot} is not available",
                    )
                )
            if (
                schedule.boarding_point
                and option.boarding_points
                and schedule.boarding_point not in option.boarding_points
            ):
                errors.append(
                    FieldError("schedule.boarding_point", "Unknown boarding point")
                )
            if (
                schedule.dropping_point
                and option.dropping_points
                and schedule.dropping_point not in option.dropping_points
            ):
                errors.append(
                    FieldError("schedule.dropping_point", "Unknown dropping point")
                )

    if draft.offering.kind.uses_roster:
        for i, item in enumerate(draft.roster):
            if not item.name.strip():
                errors.append(FieldError(f"roster[{i}].name", "Name is required"))

    return errors


def validate_contact(contact: Contact) -> list[FieldError]:
    """連絡先ステップの必須項目を検証する"""
    errors: list[FieldError] = []

    if not contact.name.strip():
        errors.append(FieldError("contact.name", "Name is required"))

    if not contact.phone.strip():
        errors.append(FieldError("contact.phone", "Phone number is required"))
    elif not PHONE_PATTERN.match(contact.phone.strip()):
        errors.append(FieldError("contact.phone", "Phone number is not valid"))

    if contact.alternate_phone and not PHONE_PATTERN.match(contact.alternate_phone.strip()):
        errors.append(FieldError("contact.alternate_phone", "Phone number is not valid"))

    if not contact.email.strip():
        errors.append(FieldError("contact.email", "Email is required"))
    else:
        try:
            _email_adapter.validate_python(contact.email.strip())
        except ValidationError:
            errors.append(FieldError("contact.email", "Email address is not valid"))

    return errors
