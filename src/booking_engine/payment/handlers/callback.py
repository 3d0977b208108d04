from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from booking_engine.payment.applications import PaymentDispatcher
from booking_engine.payment.handlers.request_models import PaymentCallbackRequest
from booking_engine.payment.handlers.response_models import error_response, to_response
from booking_engine.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from booking_engine.shared.utils import configure_logging, get_logger

logger = get_logger("payment")

CallbackHandler = Callable[[dict, Any], dict]


def build_callback_handler(dispatcher: PaymentDispatcher) -> CallbackHandler:
    """決済結果コールバックのハンドラを組み立てる

    dispatcher の組み立て（Composition Root）は呼び出し側の責務。
    """
    configure_logging()

    def lambda_handler(event: dict, context: Any) -> dict:
        """決済結果コールバック Handler

        Step Functions 形式（{"Payload": {...}}）とプロバイダの生の本文の両方を受け付ける。
        """
        logger.info("Received payment callback")

        payload = event.get("Payload", event)
        try:
            request = PaymentCallbackRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning("Invalid payment callback", errors=e.error_count())
            return error_response(
                "VALIDATION_ERROR",
                "Invalid payment callback",
                [
                    {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                    for error in e.errors()
                ],
            )

        try:
            intent = dispatcher.reconcile(request.correlation_token, request.outcome)
        except ResourceNotFoundException as e:
            logger.warning(
                "Unknown payment callback", correlation_token=request.correlation_token
            )
            return error_response("NOT_FOUND", str(e))
        except BusinessRuleViolationException as e:
            logger.warning(
                "Conflicting payment callback",
                correlation_token=request.correlation_token,
                reason=str(e),
            )
            return error_response("BUSINESS_RULE_VIOLATION", str(e))

        return to_response(intent)

    return lambda_handler
