from .correlation_token import CorrelationToken as CorrelationToken
