from django.urls import path
from . import views

urlpatterns = [
    path('pricing/tiers', views.AdminPricingTierListView.as_view(), name='admin-pricing-tiers'),
    path('pricing/tiers/<uuid:tier_id>', views.AdminPricingTierDetailView.as_view(), name='admin-pricing-tier-detail'),
    path('promo-codes', views.AdminPromoCodeListView.as_view(), name='admin-promo-codes'),
    path('promo-codes/<uuid:promo_id>', views.AdminPromoCodeDetailView.as_view(), name='admin-promo-code-detail'),
    path('movies/<uuid:movie_id>/pricing', views.AdminMoviePricingView.as_view(), name='admin-movie-pricing'),
]
