from django.urls import path
from . import views

urlpatterns = [
    path('<uuid:transaction_id>/confirm', views.AdminPaymentConfirmView.as_view(), name='admin-payment-confirm'),
    path('<uuid:transaction_id>/reject', views.AdminPaymentRejectView.as_view(), name='admin-payment-reject'),
]
