"""名簿（乗客・参加者）の操作

いずれも純粋関数で、新しい下書きを含む TransitionResult を返す。
追加・削除は BookingDraft.revise() を通るため、料金内訳は同じ操作の中で
再計算される。
"""

import dataclasses

from booking_engine.booking.domain.entity import BookingDraft
from booking_engine.booking.domain.enum import BookingStep
from booking_engine.booking.domain.value_object import LineItem, TransitionResult
from booking_engine.shared.domain import FieldError


def add_line_item(draft: BookingDraft, item: LineItem | None = None) -> TransitionResult:
    """名簿の末尾に1行追加する（定員を超える場合は何もしない）"""
    if (error := _guard(draft)) is not None:
        return TransitionResult.rejected(draft, error)

    maximum = draft.offering.max_roster_size
    if len(draft.roster) >= maximum:
        return TransitionResult.rejected(
            draft,
            FieldError.capacity("roster", f"At most {maximum} travellers per booking"),
        )

    new_item = item or LineItem()
    if new_item.slot_id and _slot_holder(draft, new_item.slot_id) is not None:
        return TransitionResult.rejected(draft, _slot_taken(len(draft.roster), new_item.slot_id))

    return TransitionResult(draft=draft.revise(roster=draft.roster + (new_item,)))


def remove_line_item(draft: BookingDraft, index: int) -> TransitionResult:
    """名簿から1行削除する（最後の1行は削除できない）"""
    if (error := _guard(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    if (error := _check_index(draft, index)) is not None:
        return TransitionResult.rejected(draft, error)
    if len(draft.roster) <= 1:
        return TransitionResult.rejected(
            draft,
            FieldError.capacity("roster", "A booking needs at least one traveller"),
        )

    roster = draft.roster[:index] + draft.roster[index + 1 :]
    return TransitionResult(draft=draft.revise(roster=roster))


def update_line_item(draft: BookingDraft, index: int, item: LineItem) -> TransitionResult:
    """1行分の入力内容を置き換える"""
    if (error := _guard(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    if (error := _check_index(draft, index)) is not None:
        return TransitionResult.rejected(draft, error)
    if item.slot_id:
        holder = _slot_holder(draft, item.slot_id)
        if holder is not None and holder != index:
            return TransitionResult.rejected(draft, _slot_taken(index, item.slot_id))

    roster = draft.roster[:index] + (item,) + draft.roster[index + 1 :]
    return TransitionResult(draft=draft.revise(roster=roster))


def assign_slot(draft: BookingDraft, index: int, slot_id: str | None) -> TransitionResult:
    """座席などの枠を割り当てる。None で割り当てを解除する"""
    if (error := _guard(draft)) is not None:
        return TransitionResult.rejected(draft, error)
    if (error := _check_index(draft, index)) is not None:
        return TransitionResult.rejected(draft, error)
    if slot_id:
        holder = _slot_holder(draft, slot_id)
        if holder is not None and holder != index:
            return TransitionResult.rejected(draft, _slot_taken(index, slot_id))

    item = dataclasses.replace(draft.roster[index], slot_id=slot_id or None)
    roster = draft.roster[:index] + (item,) + draft.roster[index + 1 :]
    # 枠の割り当ては料金に影響しないので再計算しない
    return TransitionResult(draft=dataclasses.replace(draft, roster=roster))


def _guard(draft: BookingDraft) -> FieldError | None:
    if not draft.offering.kind.uses_roster:
        return FieldError("roster", "Cargo bookings carry a quantity, not a roster")
    if draft.step != BookingStep.COLLECTING_DETAILS:
        return FieldError("step", "Travellers can only be changed on the details step")
    return None


def _check_index(draft: BookingDraft, index: int) -> FieldError | None:
    if not 0 <= index < len(draft.roster):
        return FieldError(f"roster[{index}]", "No such traveller")
    return None


def _slot_holder(draft: BookingDraft, slot_id: str) -> int | None:
    for i, item in enumerate(draft.roster):
        if item.slot_id == slot_id:
            return i
    return None


def _slot_taken(index: int, slot_id: str) -> FieldError:
    return FieldError(f"roster[{index}].slot_id", f"Seat {slot_id} is already taken")
