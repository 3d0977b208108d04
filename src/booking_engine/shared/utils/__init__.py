from .http_client import resolve_base_url as resolve_base_url
from .http_client import resolve_timeout as resolve_timeout
from .logger import configure_logging as configure_logging
from .logger import get_logger as get_logger
from .validators import to_decimal as to_decimal
from .wire_model import WireModel as WireModel
