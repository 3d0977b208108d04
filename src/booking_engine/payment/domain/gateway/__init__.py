from .payment_gateway import CheckoutDetails as CheckoutDetails
from .payment_gateway import PaymentGateway as PaymentGateway
