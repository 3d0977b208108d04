from booking_engine.booking.domain import (
    BookingNumber,
    BookingRecord,
    BookingRecordFactory,
    BookingSnapshot,
    BookingStatus,
    SubmissionGateway,
)
from booking_engine.booking.domain.repository import BookingRecordRepository
from booking_engine.shared.domain import Identity
from booking_engine.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from booking_engine.shared.utils import get_logger

logger = get_logger("booking")


class SubmitBookingService:
    """予約送信のユースケース

    Gateway で予約を作成し、Factory で BookingRecord を生成して保存する。
    呼び出し1回につき作成される BookingRecord は高々1件。
    """

    def __init__(
        self,
        gateway: SubmissionGateway,
        repository: BookingRecordRepository,
        factory: BookingRecordFactory,
    ) -> None:
        self._gateway = gateway
        self._repository = repository
        self._factory = factory

    async def submit(self, snapshot: BookingSnapshot, identity: Identity) -> BookingRecord:
        """スナップショットを送信して予約を確定する"""
        logger.info(
            "Submitting booking",
            service_id=str(snapshot.service_id),
            total=str(snapshot.pricing.total),
        )
        receipt = await self._gateway.create(snapshot, identity)
        record = self._factory.create(snapshot, receipt)
        self._repository.save(record)
        return record

    async def cancel(
        self, booking_number: BookingNumber, identity: Identity, reason: str
    ) -> BookingRecord:
        """予約をキャンセルする

        リモート側のキャンセルが成功した場合のみローカルのステータスを変更する。
        """
        if not reason.strip():
            raise BusinessRuleViolationException("A cancellation reason is required")
        record = self._repository.find_by_id(booking_number)
        if record is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_number}")
        if record.status == BookingStatus.CANCELLED:
            return record
        if record.status.is_terminal:
            raise BusinessRuleViolationException(
                f"Cannot cancel a booking in {record.status.value} status"
            )

        await self._gateway.cancel(booking_number, identity, reason)
        record.cancel()
        self._repository.update(record)
        logger.info("Booking cancelled", booking_number=str(booking_number))
        return record
