from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar


@dataclass(frozen=True)
class BookingNumber:
    """サーバーが発行する予約番号

    通常は KS + 発行日(yymmdd) + 4桁連番 の形式。例: KS2401150001
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^KS(\d{2})(\d{2})(\d{2})(\d{4})$")

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingNumber cannot be empty")

    def __str__(self) -> str:
        return self.value

    @property
    def issued_on(self) -> date | None:
        """予約番号から発行日を読み取る（標準形式でなければ None）"""
        match = self.PATTERN.match(self.value)
        if match is None:
            return None
        year, month, day, _ = match.groups()
        try:
            return date(2000 + int(year), int(month), int(day))
        except ValueError:
            return None

    @property
    def sequence(self) -> int | None:
        match = self.PATTERN.match(self.value)
        return int(match.group(4)) if match else None
