import datetime as dt
import os
from collections.abc import Callable

from booking_engine.booking.domain import BookingRecord, BookingStatus
from booking_engine.booking.domain.repository import BookingRecordRepository
from booking_engine.payment.domain import (
    CorrelationToken,
    PaymentGateway,
    PaymentIntent,
    PaymentIntentFactory,
    PaymentIntentRepository,
    PaymentOutcome,
    PaymentProvider,
)
from booking_engine.shared.domain.exception import (
    BusinessRuleViolationException,
    PaymentFailedException,
    ResourceNotFoundException,
)
from booking_engine.shared.utils import get_logger

logger = get_logger("payment")

DEFAULT_CALLBACK_TIMEOUT_SECONDS = 900.0


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _resolve_callback_timeout(timeout: dt.timedelta | None) -> dt.timedelta:
    if timeout is not None:
        return timeout
    seconds = os.getenv("PAYMENT_CALLBACK_TIMEOUT_SECONDS")
    return dt.timedelta(
        seconds=float(seconds) if seconds else DEFAULT_CALLBACK_TIMEOUT_SECONDS
    )


class PaymentDispatcher:
    """決済の開始と結果反映を行うユースケース

    2段階のプロトコル:
    1. initiate(): 相関トークン付きの決済要求を作り、プロバイダに開始を依頼する
    2. reconcile(): コールバックで届いた結果を予約ステータスに反映する（冪等）

    予約の合計金額は読むだけで再計算しない。
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        intent_repository: PaymentIntentRepository,
        booking_repository: BookingRecordRepository,
        factory: PaymentIntentFactory,
        callback_timeout: dt.timedelta | None = None,
        clock: Callable[[], dt.datetime] = _utcnow,
    ) -> None:
        self._gateway = gateway
        self._intent_repository = intent_repository
        self._booking_repository = booking_repository
        self._factory = factory
        self._callback_timeout = _resolve_callback_timeout(callback_timeout)
        self._clock = clock

    async def initiate(
        self, record: BookingRecord, provider: PaymentProvider
    ) -> PaymentIntent:
        """決済を開始する

        Raises:
            BusinessRuleViolationException: 結果待ちの決済要求が既にある場合、
                または予約が支払い済み・キャンセル済みの場合
            PaymentFailedException: プロバイダが開始を拒否した場合
        """
        now = self._clock()
        pending = self._intent_repository.find_pending_by_booking(record.booking_number)
        if pending is not None:
            if not pending.is_expired(now):
                raise BusinessRuleViolationException(
                    f"A payment is already pending for booking {record.booking_number}"
                )
            # コールバックが届かないまま期限切れになった要求は失敗として扱う
            logger.warning(
                "Pending payment expired",
                booking_number=str(record.booking_number),
                correlation_token=str(pending.correlation_token),
            )
            self._settle(pending, record, PaymentOutcome.FAILED)

        record.await_payment()
        self._discard_failed(record)

        # プロバイダ呼び出しの前に保存し、同時に届いた initiate を結果待ちとして弾く
        intent = self._factory.create(record, provider, now + self._callback_timeout)
        self._intent_repository.save(intent)
        self._booking_repository.update(record)
        try:
            checkout = await self._gateway.initiate(intent)
        except PaymentFailedException:
            logger.warning(
                "Payment initiation failed",
                booking_number=str(record.booking_number),
                provider=provider.value,
            )
            self._intent_repository.delete(intent.correlation_token)
            record.mark_payment_failed()
            self._booking_repository.update(record)
            raise

        intent.attach_checkout(checkout["payment_url"], checkout["provider_reference"])
        self._intent_repository.update(intent)
        logger.info(
            "Payment initiated",
            booking_number=str(record.booking_number),
            correlation_token=str(intent.correlation_token),
            amount=str(intent.amount),
        )
        return intent

    def reconcile(
        self, token: CorrelationToken | str, outcome: PaymentOutcome
    ) -> PaymentIntent:
        """プロバイダから届いた決済結果を反映する

        同じ結果が二度届いた場合は何もしない。

        Raises:
            ResourceNotFoundException: 相関トークンに対応する決済要求がない場合
            BusinessRuleViolationException: 確定済みの結果と矛盾する場合
        """
        if isinstance(token, str):
            token = CorrelationToken(token)
        if not outcome.is_final:
            raise ValueError("Outcome must be SUCCEEDED or FAILED")

        intent = self._intent_repository.find_by_id(token)
        if intent is None:
            raise ResourceNotFoundException(f"Payment intent not found: {token}")
        if intent.outcome == outcome:
            logger.info(
                "Duplicate payment callback ignored",
                correlation_token=str(token),
                outcome=outcome.value,
            )
            return intent

        record = self._booking_repository.find_by_id(intent.booking_number)
        if record is None:
            raise ResourceNotFoundException(
                f"Booking not found: {intent.booking_number}"
            )
        if intent.is_pending and record.status != BookingStatus.AWAITING_PAYMENT:
            raise BusinessRuleViolationException(
                f"Booking {record.booking_number} is not awaiting payment"
            )

        self._settle(intent, record, outcome)
        return intent

    def _settle(
        self, intent: PaymentIntent, record: BookingRecord, outcome: PaymentOutcome
    ) -> None:
        intent.resolve(outcome)
        if outcome == PaymentOutcome.SUCCEEDED:
            record.mark_paid()
        else:
            record.mark_payment_failed()
        self._intent_repository.update(intent)
        self._booking_repository.update(record)
        logger.info(
            "Payment reconciled",
            booking_number=str(record.booking_number),
            correlation_token=str(intent.correlation_token),
            outcome=outcome.value,
            status=record.status.value,
        )

    def _discard_failed(self, record: BookingRecord) -> None:
        """失敗した決済要求は変更せずに破棄する"""
        for intent in self._intent_repository.find_by_booking(record.booking_number):
            if intent.outcome == PaymentOutcome.FAILED:
                self._intent_repository.delete(intent.correlation_token)
