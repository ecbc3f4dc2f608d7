import uuid

from django.core.exceptions import ValidationError
from django.db import models


class PromoCode(models.Model):
    """Redeemable discount code for movie rentals"""

    DISCOUNT_FREE = 'free'
    DISCOUNT_PERCENTAGE = 'percentage'
    DISCOUNT_FIXED = 'fixed'

    DISCOUNT_TYPE_CHOICES = [
        (DISCOUNT_FREE, 'Free'),
        (DISCOUNT_PERCENTAGE, 'Percentage'),
        (DISCOUNT_FIXED, 'Fixed amount'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=50, unique=True, help_text="Stored uppercase")
    discount_type = models.CharField(max_length=20, choices=DISCOUNT_TYPE_CHOICES)
    discount_value = models.IntegerField(
        null=True,
        blank=True,
        help_text="Percent (1-100) or amount in LAK; unused for free codes"
    )
    max_uses = models.PositiveIntegerField(null=True, blank=True)
    uses_count = models.PositiveIntegerField(default=0)
    valid_from = models.DateTimeField(null=True, blank=True)
    valid_to = models.DateTimeField(null=True, blank=True)
    movie = models.ForeignKey(
        'movies.Movie',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='promo_codes',
        help_text="Restrict the code to a single movie"
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'promo_codes'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_active', 'valid_from', 'valid_to'], name='promo_code_active_window_idx'),
        ]

    def __str__(self):
        return self.code

    def save(self, *args, **kwargs):
        self.code = self.normalize_code(self.code)
        super().save(*args, **kwargs)

    def clean(self):
        errors = {}
        if self.discount_type == self.DISCOUNT_PERCENTAGE:
            if self.discount_value is None or not 0 < self.discount_value <= 100:
                errors['discount_value'] = 'Percentage discount must be greater than 0 and at most 100.'
        elif self.discount_type == self.DISCOUNT_FIXED:
            if self.discount_value is None or self.discount_value < 0:
                errors['discount_value'] = 'Fixed discount must be zero or more.'
        if self.max_uses is not None and self.uses_count > self.max_uses:
            errors['uses_count'] = 'Use count cannot exceed the maximum number of uses.'
        if self.valid_from and self.valid_to and self.valid_from > self.valid_to:
            errors['valid_to'] = 'End of validity must be after its start.'
        if errors:
            raise ValidationError(errors)

    @staticmethod
    def normalize_code(code):
        return (code or '').strip().upper()

    @property
    def is_exhausted(self):
        return self.max_uses is not None and self.uses_count >= self.max_uses
