from .currency import Currency as Currency
from .field_error import ErrorKind as ErrorKind
from .field_error import FieldError as FieldError
from .identity import Identity as Identity
from .money import Money as Money
from .money import quantize as quantize
