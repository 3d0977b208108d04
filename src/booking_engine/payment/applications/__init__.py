from .payment_dispatcher import PaymentDispatcher as PaymentDispatcher
