import uuid

from django.conf import settings
from django.db import models


class PaymentTransaction(models.Model):
    """A payment attempt for a movie rental"""

    STATUS_PENDING = 'pending'
    STATUS_SUCCESS = 'success'
    STATUS_FAILED = 'failed'
    STATUS_REFUNDED = 'refunded'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_SUCCESS, 'Success'),
        (STATUS_FAILED, 'Failed'),
        (STATUS_REFUNDED, 'Refunded'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rental = models.ForeignKey(
        'rentals.Rental',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payment_transactions'
    )
    movie = models.ForeignKey('movies.Movie', on_delete=models.CASCADE, related_name='payment_transactions')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    anonymous_id = models.CharField(max_length=100, null=True, blank=True)

    provider = models.CharField(max_length=30, help_text="Payment provider name, e.g. 'free' or 'manual'")
    provider_transaction_id = models.CharField(max_length=200, blank=True)

    amount_lak = models.IntegerField(help_text="Amount charged after discount")
    original_amount_lak = models.IntegerField(null=True, blank=True, help_text="Amount before discount")
    promo_code = models.ForeignKey(
        'pricing.PromoCode',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payment_transactions'
    )

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    provider_response = models.JSONField(default=dict, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payment_transactions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='payment_status_created_idx'),
        ]

    def __str__(self):
        return f"{self.id} - {self.amount_lak} LAK - {self.status}"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING
