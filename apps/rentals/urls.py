from django.urls import path
from . import views

urlpatterns = [
    path('rentals', views.RentalListView.as_view(), name='rental-list'),
    path('rentals/<uuid:movie_id>', views.RentalCheckoutView.as_view(), name='rental-detail'),
]
