"""
Test configuration for the cinema server.
"""
import os

import pytest
from rest_framework.test import APIClient


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'cinema_server.settings.test')
    os.environ.setdefault('ENVIRONMENT', 'test')


@pytest.fixture
def api_client():
    """Unauthenticated DRF client."""
    return APIClient()


@pytest.fixture
def viewer(db):
    """A regular signed-in user."""
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def admin_user(db):
    """A staff user allowed on the admin routes."""
    from tests.factories import AdminUserFactory
    return AdminUserFactory()


@pytest.fixture
def viewer_client(viewer):
    client = APIClient()
    client.force_authenticate(user=viewer)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def standard_tier(db):
    """Standard tier priced at 75000 LAK."""
    from tests.factories import PricingTierFactory
    return PricingTierFactory(name='standard', display_name_en='Standard', price_lak=75000, sort_order=1)


@pytest.fixture
def priced_movie(standard_tier):
    """A movie on the standard tier."""
    from tests.factories import MovieFactory
    return MovieFactory(pricing_tier=standard_tier)


@pytest.fixture
def unpriced_movie(db):
    """A movie without a pricing tier."""
    from tests.factories import MovieFactory
    return MovieFactory(pricing_tier=None)
