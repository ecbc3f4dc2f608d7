import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class RentalQuerySet(models.QuerySet):

    def active(self, now=None):
        return self.filter(expires_at__gt=now or timezone.now())

    def for_viewer(self, user=None, anonymous_id=None):
        if user is not None and user.is_authenticated:
            return self.filter(user=user)
        return self.filter(user__isnull=True, anonymous_id=anonymous_id)


class Rental(models.Model):
    """Time-limited access to a movie, owned by a user or an anonymous viewer"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='rentals'
    )
    anonymous_id = models.CharField(max_length=100, null=True, blank=True, db_index=True)
    movie = models.ForeignKey('movies.Movie', on_delete=models.CASCADE, related_name='rentals')
    purchased_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField()
    transaction_id = models.CharField(max_length=100)
    amount = models.IntegerField(help_text="Amount paid in minor currency units")
    currency = models.CharField(max_length=3, default='LAK')
    payment_method = models.CharField(max_length=30, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = RentalQuerySet.as_manager()

    class Meta:
        db_table = 'rentals'
        ordering = ['-purchased_at']
        indexes = [
            models.Index(fields=['user', 'expires_at'], name='rental_user_expiry_idx'),
            models.Index(fields=['anonymous_id', 'expires_at'], name='rental_anon_expiry_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(user__isnull=False) | models.Q(anonymous_id__isnull=False),
                name='rental_has_owner',
            ),
        ]

    def __str__(self):
        return f"Rental {self.id} of {self.movie_id}"

    @property
    def is_active(self):
        return self.expires_at > timezone.now()
