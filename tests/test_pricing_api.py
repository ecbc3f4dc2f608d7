"""
API tests for public pricing endpoints
"""
import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from tests.factories import MovieFactory, PricingTierFactory, PromoCodeFactory, create_priced_movie


@pytest.mark.django_db
class TestMoviePricingEndpoint:

    def test_priced_movie(self, api_client, priced_movie):
        response = api_client.get(f'/api/movies/{priced_movie.id}/pricing')

        assert response.status_code == 200
        pricing = response.json()['pricing']
        assert pricing['available'] is True
        assert pricing['originalAmountLak'] == 75000
        assert pricing['finalAmountLak'] == 75000
        assert pricing['tier']['name'] == 'standard'
        assert pricing['tier']['priceLak'] == 75000
        assert 'unavailableReason' not in pricing

    def test_unpriced_movie(self, api_client, unpriced_movie):
        response = api_client.get(f'/api/movies/{unpriced_movie.id}/pricing')

        assert response.status_code == 200
        assert response.json()['pricing'] == {'available': False, 'unavailableReason': 'no_pricing'}

    def test_inactive_tier(self, api_client):
        movie = MovieFactory(pricing_tier=PricingTierFactory(is_active=False))
        response = api_client.get(f'/api/movies/{movie.id}/pricing')
        assert response.json()['pricing']['available'] is False

    def test_missing_movie(self, api_client):
        response = api_client.get(f'/api/movies/{uuid.uuid4()}/pricing')

        assert response.status_code == 404
        assert response.json()['code'] == 404


@pytest.mark.django_db
class TestPromoValidateEndpoint:

    def test_valid_free_code(self, api_client, priced_movie):
        PromoCodeFactory(code='FREEWATCH', discount_type='free', discount_value=None)
        response = api_client.post(
            '/api/promo-codes/validate',
            {'code': 'freewatch', 'movieId': str(priced_movie.id)},
            format='json'
        )

        assert response.status_code == 200
        validation = response.json()['validation']
        assert validation['valid'] is True
        assert validation['code'] == 'FREEWATCH'
        assert validation['discountType'] == 'free'
        assert validation['discountAmountLak'] == 75000
        assert validation['finalAmountLak'] == 0
        assert 'error' not in validation

    def test_percentage_code(self, api_client):
        movie = create_priced_movie(100000)
        PromoCodeFactory(code='HALF50', discount_type='percentage', discount_value=50)
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'half50', 'movieId': str(movie.id)}, format='json'
        )

        validation = response.json()['validation']
        assert validation['discountValue'] == 50
        assert validation['discountAmountLak'] == 50000
        assert validation['finalAmountLak'] == 50000

    def test_expired_code_is_a_normal_result(self, api_client, priced_movie):
        PromoCodeFactory(code='OLD', valid_to=timezone.now() - timedelta(days=1))
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'OLD', 'movieId': str(priced_movie.id)}, format='json'
        )

        assert response.status_code == 200
        validation = response.json()['validation']
        assert validation['valid'] is False
        assert validation['errorCode'] == 'expired'
        assert 'expired' in validation['error']

    def test_usage_limit(self, api_client, priced_movie):
        PromoCodeFactory(code='USEDUP', max_uses=2, uses_count=2)
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'USEDUP', 'movieId': str(priced_movie.id)}, format='json'
        )

        assert response.status_code == 200
        assert response.json()['validation']['error'] == 'usage limit reached'

    def test_unknown_code(self, api_client, priced_movie):
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'NOPE', 'movieId': str(priced_movie.id)}, format='json'
        )
        assert response.json()['validation'] == {
            'valid': False,
            'code': 'NOPE',
            'error': 'code not found',
            'errorCode': 'not_found',
        }

    def test_movie_without_pricing_is_bad_request(self, api_client, unpriced_movie):
        PromoCodeFactory(code='ANY')
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'ANY', 'movieId': str(unpriced_movie.id)}, format='json'
        )

        assert response.status_code == 400
        assert response.json()['msg'] == 'movie has no pricing'
        assert 'validation' not in response.json()

    def test_missing_movie_is_bad_request(self, api_client):
        response = api_client.post(
            '/api/promo-codes/validate', {'code': 'ANY', 'movieId': str(uuid.uuid4())}, format='json'
        )
        assert response.status_code == 400

    @pytest.mark.parametrize('body', [
        {},
        {'code': 'ANY'},
        {'movieId': '00000000-0000-0000-0000-000000000000'},
        {'code': 'ANY', 'movieId': 'not-a-uuid'},
    ])
    def test_missing_fields(self, api_client, body):
        response = api_client.post('/api/promo-codes/validate', body, format='json')
        assert response.status_code == 400
        assert response.json()['code'] == 400
