from .entity import PaymentIntent as PaymentIntent
from .enum import PaymentOutcome as PaymentOutcome
from .enum import PaymentProvider as PaymentProvider
from .factory import PaymentIntentFactory as PaymentIntentFactory
from .gateway import CheckoutDetails as CheckoutDetails
from .gateway import PaymentGateway as PaymentGateway
from .repository import PaymentIntentRepository as PaymentIntentRepository
from .value_object import CorrelationToken as CorrelationToken
