from typing import TypedDict

from booking_engine.booking.domain.entity import BookingRecord, BookingSnapshot
from booking_engine.booking.domain.enum import BookingStatus
from booking_engine.booking.domain.value_object import BookingNumber


class CreationReceipt(TypedDict):
    """予約作成 API の応答データ構造"""

    booking_number: str
    status: str


class BookingRecordFactory:
    """予約レコードのファクトリ

    - サーバー発行の予約番号を Value Object に変換
    - 作成直後のステータスは常に CREATED
    """

    def create(self, snapshot: BookingSnapshot, receipt: CreationReceipt) -> BookingRecord:
        return BookingRecord(
            id=BookingNumber(receipt["booking_number"]),
            snapshot=snapshot,
            status=BookingStatus.CREATED,
        )
