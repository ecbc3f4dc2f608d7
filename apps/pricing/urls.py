from django.urls import path
from . import views

urlpatterns = [
    path('movies/<uuid:movie_id>/pricing', views.MoviePricingView.as_view(), name='movie-pricing'),
    path('promo-codes/validate', views.PromoCodeValidateView.as_view(), name='promo-code-validate'),
]
