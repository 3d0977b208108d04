from __future__ import annotations

from booking_engine.booking.applications.submit_booking import SubmitBookingService
from booking_engine.booking.domain import (
    BookingDraft,
    BookingRecord,
    BookingStep,
    Contact,
)
from booking_engine.booking.domain.event import (
    Abandon,
    Advance,
    DraftEvent,
    GoBack,
    SubmissionAccepted,
    SubmissionRejected,
)
from booking_engine.booking.domain.service import apply
from booking_engine.catalog.applications.lookup_offering import LookupOfferingService
from booking_engine.shared.domain import FieldError, Identity
from booking_engine.shared.domain.exception import (
    AuthenticationRequiredException,
    BusinessRuleViolationException,
    SubmissionRejectedException,
    SubmissionTransportException,
)
from booking_engine.shared.utils import get_logger

logger = get_logger("booking")


class BookingWizard:
    """1回の予約セッションを管理するアプリケーションサービス

    - 下書きの遷移は純粋関数 apply() に委譲し、結果の下書きだけを保持する
    - 認証情報は明示的に受け取る（未認証では決済待ちに進めない）
    - 送信中は再送信と決済待ちからの離脱を拒否する
    """

    def __init__(
        self,
        draft: BookingDraft,
        submission_service: SubmitBookingService,
        identity: Identity | None = None,
    ) -> None:
        self._draft = draft
        self._submission_service = submission_service
        self._identity = identity
        self._record: BookingRecord | None = None
        self._last_errors: tuple[FieldError, ...] = ()
        self._submitting = False

    @classmethod
    async def start(
        cls,
        lookup_service: LookupOfferingService,
        service_id: str,
        submission_service: SubmitBookingService,
        identity: Identity | None = None,
        contact: Contact | None = None,
    ) -> BookingWizard:
        """サービス定義を取得し、初期状態の下書きでウィザードを開始する

        Raises:
            CatalogUnavailableException: サービス定義を取得できない場合
        """
        offering = await lookup_service.lookup(service_id)
        logger.info("Booking session started", service_id=service_id)
        return cls(
            BookingDraft.seed(offering, contact),
            submission_service=submission_service,
            identity=identity,
        )

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def identity(self) -> Identity | None:
        return self._identity

    @property
    def record(self) -> BookingRecord | None:
        """送信成功後の予約レコード"""
        return self._record

    @property
    def last_errors(self) -> tuple[FieldError, ...]:
        return self._last_errors

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def can_submit(self) -> bool:
        return (
            self._draft.step == BookingStep.AWAITING_PAYMENT
            and self._draft.snapshot is not None
            and not self._submitting
        )

    def sign_in(self, identity: Identity) -> None:
        self._identity = identity

    def dispatch(self, event: DraftEvent) -> tuple[FieldError, ...]:
        """イベントを適用し、フィールド単位のエラーを返す

        Raises:
            AuthenticationRequiredException: 未認証のまま決済待ちに進もうとした場合
        """
        if self._submitting and isinstance(event, (GoBack, Abandon)):
            return self._reject(FieldError("step", "Submission is in progress"))
        if (
            isinstance(event, Advance)
            and self._draft.step == BookingStep.COLLECTING_CONTACT
            and self._identity is None
        ):
            raise AuthenticationRequiredException("Sign in to continue the booking")

        previous = self._draft.step
        result = apply(self._draft, event)
        self._last_errors = result.errors
        if not result.ok:
            return result.errors

        self._draft = result.draft
        if self._draft.step != previous:
            logger.info(
                "Booking step changed",
                previous=previous.value,
                current=self._draft.step.value,
            )
        if self._draft.pricing.total_floored:
            logger.warning(
                "Discount exceeds subtotal, total floored at zero",
                service_id=str(self._draft.offering.id),
                discount=str(self._draft.pricing.discount),
            )
        return ()

    async def submit(self) -> BookingRecord:
        """凍結済みスナップショットを送信する

        Raises:
            SubmissionRejectedException: リモート側で拒否された（詳細入力に戻る）
            SubmissionTransportException: 通信エラー（スナップショットを保持し再試行可能）
        """
        if self._submitting:
            raise BusinessRuleViolationException("Submission is already in progress")
        snapshot = self._draft.snapshot
        if self._draft.step != BookingStep.AWAITING_PAYMENT or snapshot is None:
            raise BusinessRuleViolationException("No booking is waiting to be submitted")
        if self._identity is None:
            raise AuthenticationRequiredException("Sign in to submit the booking")

        self._submitting = True
        try:
            record = await self._submission_service.submit(snapshot, self._identity)
        except SubmissionRejectedException as e:
            logger.warning(
                "Booking rejected", errors=[str(error) for error in e.errors]
            )
            self._draft = apply(self._draft, SubmissionRejected()).draft
            self._last_errors = tuple(e.errors)
            raise
        except SubmissionTransportException as e:
            logger.warning("Booking submission failed, retry allowed", reason=str(e))
            raise
        finally:
            self._submitting = False

        self._draft = apply(self._draft, SubmissionAccepted()).draft
        self._record = record
        self._last_errors = ()
        logger.info("Booking submitted", booking_number=str(record.booking_number))
        return record

    async def cancel(self, reason: str) -> BookingRecord:
        """送信済みの予約をキャンセルする"""
        if self._record is None:
            raise BusinessRuleViolationException("No booking has been submitted")
        if self._identity is None:
            raise AuthenticationRequiredException("Sign in to cancel the booking")
        self._record = await self._submission_service.cancel(
            self._record.booking_number, self._identity, reason
        )
        return self._record

    def _reject(self, *errors: FieldError) -> tuple[FieldError, ...]:
        self._last_errors = errors
        return errors
