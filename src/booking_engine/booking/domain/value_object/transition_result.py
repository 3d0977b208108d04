from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from booking_engine.shared.domain import FieldError

if TYPE_CHECKING:
    from booking_engine.booking.domain.entity.booking_draft import BookingDraft


@dataclass(frozen=True)
class TransitionResult:
    """遷移関数の戻り値

    エラーがある場合、draft は遷移前と同一のオブジェクトを返す。
    """

    draft: BookingDraft
    errors: tuple[FieldError, ...] = field(default=())

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def rejected(cls, draft: BookingDraft, *errors: FieldError) -> TransitionResult:
        return cls(draft=draft, errors=tuple(errors))
