from .pricing_calculator import compute_pricing as compute_pricing
