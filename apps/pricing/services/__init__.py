"""
Pricing services module.

All services are exported from this module.
"""
from .resolver import (
    PricingResolver, PricingResult, PromoValidation, Discount,
    calculate_discount, PROMO_ERRORS, UNAVAILABLE_NO_PRICING
)
from .redemption import PromoRedemptionService

__all__ = [
    'PricingResolver',
    'PricingResult',
    'PromoValidation',
    'Discount',
    'calculate_discount',
    'PROMO_ERRORS',
    'UNAVAILABLE_NO_PRICING',
    'PromoRedemptionService',
]
