from .add_on import AddOn as AddOn
from .schedule_option import ScheduleOption as ScheduleOption
from .service_id import ServiceId as ServiceId
from .tax_rule import TaxRule as TaxRule
