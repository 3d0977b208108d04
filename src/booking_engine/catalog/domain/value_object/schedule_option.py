import datetime as dt
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScheduleOption:
    """予約可能な日付と、その日の時間帯・乗降地点"""

    date: dt.date
    time_slots: tuple[str, ...] = ()
    boarding_points: tuple[str, ...] = field(default=())
    dropping_points: tuple[str, ...] = field(default=())

    def offers_slot(self, time_slot: str) -> bool:
        # 時間帯が定義されていない日はどの時間帯でも受け付ける
        return not self.time_slots or time_slot in self.time_slots
