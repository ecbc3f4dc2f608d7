"""
Pricing models module.

All models are exported from this module.
"""
from .tier import PricingTier
from .promo_code import PromoCode
from .promo_code_use import PromoCodeUse

__all__ = [
    'PricingTier',
    'PromoCode',
    'PromoCodeUse',
]
