from abc import abstractmethod

from booking_engine.booking.domain.entity import BookingRecord
from booking_engine.booking.domain.value_object import BookingNumber
from booking_engine.shared.domain import Repository


class BookingRecordRepository(Repository[BookingRecord, BookingNumber]):
    """予約レコードリポジトリのインターフェース"""

    @abstractmethod
    def save(self, record: BookingRecord) -> None:
        """予約レコードを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_number: BookingNumber) -> BookingRecord | None:
        """予約番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, record: BookingRecord) -> None:
        """予約レコードを更新する"""
        raise NotImplementedError
