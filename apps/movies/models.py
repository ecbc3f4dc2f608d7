"""
Movie catalogue models.

Only the parts of the catalogue that pricing and rentals depend on live here.
"""
import uuid

from django.db import models


class Movie(models.Model):
    """A film that can be priced and rented"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    original_title = models.CharField(max_length=255)
    original_language = models.CharField(max_length=10, default='lo')
    release_date = models.DateField(null=True, blank=True)
    runtime = models.PositiveIntegerField(null=True, blank=True, help_text="Runtime in minutes")
    pricing_tier = models.ForeignKey(
        'pricing.PricingTier',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='movies'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'movies'
        ordering = ['-created_at']

    def __str__(self):
        return self.display_title

    @property
    def display_title(self):
        """English title first, then Lao, then the original title"""
        titles = {t.language: t.title for t in self.translations.all()}
        return titles.get('en') or titles.get('lo') or self.original_title


class MovieTranslation(models.Model):
    """Localized title and overview of a movie"""

    LANGUAGE_CHOICES = [
        ('en', 'English'),
        ('lo', 'Lao'),
    ]

    movie = models.ForeignKey(Movie, on_delete=models.CASCADE, related_name='translations')
    language = models.CharField(max_length=2, choices=LANGUAGE_CHOICES)
    title = models.CharField(max_length=255)
    overview = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'movie_translations'
        constraints = [
            models.UniqueConstraint(fields=['movie', 'language'], name='movie_translation_language_unique'),
        ]

    def __str__(self):
        return f"{self.title} ({self.language})"
