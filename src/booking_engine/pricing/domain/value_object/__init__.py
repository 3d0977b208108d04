from .pricing_breakdown import AddOnLine as AddOnLine
from .pricing_breakdown import PricingBreakdown as PricingBreakdown
from .pricing_breakdown import TaxLine as TaxLine
from .pricing_options import PricingOptions as PricingOptions
from .pricing_options import PromotionalDiscount as PromotionalDiscount
