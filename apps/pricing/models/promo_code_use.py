import uuid

from django.conf import settings
from django.db import models


class PromoCodeUse(models.Model):
    """Append-only record of a promo code redeemed by a rental"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    promo_code = models.ForeignKey('PromoCode', on_delete=models.CASCADE, related_name='uses')
    rental = models.ForeignKey('rentals.Rental', on_delete=models.CASCADE, related_name='promo_code_uses')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    anonymous_id = models.CharField(max_length=100, null=True, blank=True)
    used_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'promo_code_uses'
        ordering = ['-used_at']
        constraints = [
            models.UniqueConstraint(fields=['promo_code', 'rental'], name='promo_code_use_once_per_rental'),
        ]

    def __str__(self):
        return f"{self.promo_code.code} -> {self.rental_id}"
