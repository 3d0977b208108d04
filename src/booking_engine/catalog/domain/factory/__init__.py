from .service_offering_factory import OfferingDetails as OfferingDetails
from .service_offering_factory import (
    ServiceOfferingFactory as ServiceOfferingFactory,
)
