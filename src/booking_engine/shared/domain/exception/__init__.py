from .exceptions import (
    AuthenticationRequiredException as AuthenticationRequiredException,
)
from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    CatalogUnavailableException as CatalogUnavailableException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    PaymentFailedException as PaymentFailedException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    SubmissionRejectedException as SubmissionRejectedException,
)
from .exceptions import (
    SubmissionTransportException as SubmissionTransportException,
)
