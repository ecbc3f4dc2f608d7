"""
Pricing views module.

All views are exported from this module.
"""
from .tier_views import AdminPricingTierListView, AdminPricingTierDetailView
from .promo_views import AdminPromoCodeListView, AdminPromoCodeDetailView
from .public_views import MoviePricingView, PromoCodeValidateView
from .movie_pricing_views import AdminMoviePricingView

__all__ = [
    'AdminPricingTierListView',
    'AdminPricingTierDetailView',
    'AdminPromoCodeListView',
    'AdminPromoCodeDetailView',
    'MoviePricingView',
    'PromoCodeValidateView',
    'AdminMoviePricingView',
]
