from .http_payment_gateway import HttpPaymentGateway as HttpPaymentGateway
from .in_memory_payment_intent_repository import (
    InMemoryPaymentIntentRepository as InMemoryPaymentIntentRepository,
)
