from .entity import ServiceOffering as ServiceOffering
from .enum import ServiceKind as ServiceKind
from .factory import OfferingDetails as OfferingDetails
from .factory import ServiceOfferingFactory as ServiceOfferingFactory
from .gateway import CatalogGateway as CatalogGateway
from .value_object import AddOn as AddOn
from .value_object import ScheduleOption as ScheduleOption
from .value_object import ServiceId as ServiceId
from .value_object import TaxRule as TaxRule
