from .payment_intent_factory import PaymentIntentFactory as PaymentIntentFactory
