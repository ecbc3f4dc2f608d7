"""
Test factories for creating test data using factory_boy.
"""
from datetime import timedelta

import factory
from factory.django import DjangoModelFactory
from django.contrib.auth import get_user_model
from django.utils import timezone

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"viewer{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    password = factory.django.Password('test_password_123')
    is_active = True


class AdminUserFactory(UserFactory):
    """Factory for staff users allowed on the admin routes."""
    username = factory.Sequence(lambda n: f"admin{n}")
    is_staff = True


class PricingTierFactory(DjangoModelFactory):
    """Factory for creating pricing tiers."""

    class Meta:
        model = 'pricing.PricingTier'
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f"tier{n}")
    display_name_en = factory.LazyAttribute(lambda obj: obj.name.title())
    display_name_lo = None
    price_lak = 75000
    is_active = True
    sort_order = 0


class MovieFactory(DjangoModelFactory):
    """Factory for creating movies."""

    class Meta:
        model = 'movies.Movie'

    original_title = factory.Sequence(lambda n: f"Movie {n}")
    original_language = 'lo'
    runtime = 95
    pricing_tier = factory.SubFactory(PricingTierFactory)


class MovieTranslationFactory(DjangoModelFactory):
    """Factory for movie titles."""

    class Meta:
        model = 'movies.MovieTranslation'

    movie = factory.SubFactory(MovieFactory)
    language = 'en'
    title = factory.Sequence(lambda n: f"Translated Movie {n}")


class PromoCodeFactory(DjangoModelFactory):
    """Factory for creating promo codes."""

    class Meta:
        model = 'pricing.PromoCode'

    code = factory.Sequence(lambda n: f"PROMO{n}")
    discount_type = 'percentage'
    discount_value = 50
    max_uses = None
    uses_count = 0
    valid_from = None
    valid_to = None
    movie = None
    is_active = True


class RentalFactory(DjangoModelFactory):
    """Factory for active rentals."""

    class Meta:
        model = 'rentals.Rental'

    user = factory.SubFactory(UserFactory)
    anonymous_id = None
    movie = factory.SubFactory(MovieFactory)
    purchased_at = factory.LazyFunction(timezone.now)
    expires_at = factory.LazyAttribute(lambda obj: obj.purchased_at + timedelta(hours=24))
    transaction_id = factory.Sequence(lambda n: f"txn-{n}")
    amount = 75000
    currency = 'LAK'
    payment_method = 'manual'


def create_priced_movie(price_lak=75000, tier_name=None, **movie_kwargs):
    """Create a movie on a tier with the given price"""
    tier_kwargs = {'price_lak': price_lak}
    if tier_name:
        tier_kwargs['name'] = tier_name
    tier = PricingTierFactory(**tier_kwargs)
    return MovieFactory(pricing_tier=tier, **movie_kwargs)
