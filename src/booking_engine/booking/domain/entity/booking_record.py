from booking_engine.booking.domain.entity.booking_snapshot import BookingSnapshot
from booking_engine.booking.domain.enum import BookingStatus
from booking_engine.booking.domain.event import BookingStatusChanged
from booking_engine.booking.domain.value_object import BookingNumber
from booking_engine.shared.domain import AggregateRoot, Money
from booking_engine.shared.domain.exception import BusinessRuleViolationException


class BookingRecord(AggregateRoot[BookingNumber]):
    """サーバーで確定した予約

    スナップショットは作成後に変更されない。決済イベントが変えるのはステータスのみ。
    """

    def __init__(
        self,
        id: BookingNumber,
        snapshot: BookingSnapshot,
        status: BookingStatus = BookingStatus.CREATED,
    ) -> None:
        super().__init__(id)
        self._snapshot = snapshot
        self._status = status

    @property
    def booking_number(self) -> BookingNumber:
        return self.id

    @property
    def snapshot(self) -> BookingSnapshot:
        return self._snapshot

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def total(self) -> Money:
        """送信時に確定した合計金額"""
        return self._snapshot.pricing.total_money()

    def await_payment(self) -> None:
        """決済待ちにする（決済失敗後の再試行を含む）"""
        if self._status == BookingStatus.AWAITING_PAYMENT:
            return
        if self._status not in (BookingStatus.CREATED, BookingStatus.PAYMENT_FAILED):
            raise BusinessRuleViolationException(
                f"Cannot start payment for a booking in {self._status.value} status"
            )
        self._change_status(BookingStatus.AWAITING_PAYMENT)

    def mark_paid(self) -> None:
        """決済完了"""
        if self._status == BookingStatus.PAID:
            return
        if self._status != BookingStatus.AWAITING_PAYMENT:
            raise BusinessRuleViolationException(
                f"Cannot mark a booking in {self._status.value} status as paid"
            )
        self._change_status(BookingStatus.PAID)

    def mark_payment_failed(self) -> None:
        """決済失敗（再試行可能）"""
        if self._status == BookingStatus.PAYMENT_FAILED:
            return
        if self._status != BookingStatus.AWAITING_PAYMENT:
            raise BusinessRuleViolationException(
                f"Cannot fail payment for a booking in {self._status.value} status"
            )
        self._change_status(BookingStatus.PAYMENT_FAILED)

    def cancel(self) -> None:
        """予約をキャンセルする（終端状態以外から可能）"""
        if self._status == BookingStatus.CANCELLED:
            return
        if self._status.is_terminal:
            raise BusinessRuleViolationException(
                f"Cannot cancel a booking in {self._status.value} status"
            )
        self._change_status(BookingStatus.CANCELLED)

    def _change_status(self, status: BookingStatus) -> None:
        previous = self._status
        self._status = status
        self.add_domain_event(
            BookingStatusChanged(
                booking_number=self.id, previous=previous, current=status
            )
        )
