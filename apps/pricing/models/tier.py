import uuid

from django.core.validators import MinValueValidator
from django.db import models


class PricingTier(models.Model):
    """Admin-defined rental price point that movies are assigned to"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, unique=True, help_text="Machine name, e.g. 'standard'")
    display_name_en = models.CharField(max_length=100)
    display_name_lo = models.CharField(max_length=100, null=True, blank=True)
    price_lak = models.IntegerField(validators=[MinValueValidator(0)], help_text="Price in Lao Kip")
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pricing_tiers'
        ordering = ['sort_order', 'price_lak']
        constraints = [
            models.CheckConstraint(condition=models.Q(price_lak__gte=0), name='pricing_tier_price_non_negative'),
        ]

    def __str__(self):
        return f"{self.display_name_en} ({self.price_lak} LAK)"
