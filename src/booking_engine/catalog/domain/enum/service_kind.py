from enum import Enum


class ServiceKind(str, Enum):
    """サービス種別"""

    SEAT_TRANSPORT = "seat-transport"
    CARGO = "cargo"
    TOUR = "tour"

    @property
    def uses_roster(self) -> bool:
        """乗客・参加者の名簿を持つ種別かどうか（貨物は数量のみ）"""
        return self is not ServiceKind.CARGO
