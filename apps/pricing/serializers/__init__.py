"""
Pricing serializers module.

All serializers are exported from this module.
"""
from .tier_serializers import (
    PricingTierSerializer, PricingTierCreateSerializer, PricingTierUpdateSerializer
)
from .promo_serializers import (
    PromoCodeSerializer, PromoCodeCreateSerializer, PromoCodeUpdateSerializer
)
from .resolution_serializers import (
    PricingResultSerializer, PromoValidationSerializer,
    PromoValidateRequestSerializer, MovieTierAssignmentSerializer
)

__all__ = [
    'PricingTierSerializer',
    'PricingTierCreateSerializer',
    'PricingTierUpdateSerializer',
    'PromoCodeSerializer',
    'PromoCodeCreateSerializer',
    'PromoCodeUpdateSerializer',
    'PricingResultSerializer',
    'PromoValidationSerializer',
    'PromoValidateRequestSerializer',
    'MovieTierAssignmentSerializer',
]
