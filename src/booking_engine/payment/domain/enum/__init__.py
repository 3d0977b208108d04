from .payment_outcome import PaymentOutcome as PaymentOutcome
from .payment_provider import PaymentProvider as PaymentProvider
