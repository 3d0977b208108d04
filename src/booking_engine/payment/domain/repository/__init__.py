from .payment_intent_repository import (
    PaymentIntentRepository as PaymentIntentRepository,
)
