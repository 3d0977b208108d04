import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleSelection:
    """日付・時間帯・乗降地点の選択"""

    date: dt.date | None = None
    time_slot: str | None = None
    boarding_point: str | None = None
    dropping_point: str | None = None
