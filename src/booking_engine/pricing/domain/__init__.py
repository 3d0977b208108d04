from .enum import Urgency as Urgency
from .service import compute_pricing as compute_pricing
from .value_object import AddOnLine as AddOnLine
from .value_object import PricingBreakdown as PricingBreakdown
from .value_object import PricingOptions as PricingOptions
from .value_object import PromotionalDiscount as PromotionalDiscount
from .value_object import TaxLine as TaxLine
