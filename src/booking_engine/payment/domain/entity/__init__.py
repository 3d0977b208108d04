from .payment_intent import PaymentIntent as PaymentIntent
