"""
Tests for rental checkout and manual payment confirmation
"""
import uuid
from datetime import timedelta

import pytest
from django.test import TestCase
from django.utils import timezone

from apps.payments.exceptions import PaymentNotPending, TransactionNotFound
from apps.payments.models import PaymentTransaction
from apps.pricing.exceptions import MovieNotFound, MovieNotPurchasable, PromoCodeExhausted
from apps.pricing.models import PromoCodeUse
from apps.rentals.exceptions import ActiveRentalExists, InvalidPromoCode, MissingViewer, PendingPaymentExists
from apps.rentals.models import Rental
from apps.rentals.services import RentalService
from tests.factories import (
    MovieFactory, PromoCodeFactory, RentalFactory, UserFactory, create_priced_movie
)


class RentalServiceTest(TestCase):

    def setUp(self):
        self.user = UserFactory()
        self.movie = create_priced_movie(75000)

    def test_paid_checkout_stays_pending(self):
        rental, payment = RentalService.create_rental(self.movie.id, user=self.user)

        self.assertIsNone(rental)
        self.assertEqual(payment.status, PaymentTransaction.STATUS_PENDING)
        self.assertEqual(payment.provider, 'manual')
        self.assertEqual(payment.amount_lak, 75000)
        self.assertEqual(payment.original_amount_lak, 75000)
        self.assertFalse(Rental.objects.exists())

    def test_free_code_completes_immediately(self):
        promo = PromoCodeFactory(code='FREEWATCH', discount_type='free', discount_value=None, max_uses=1)
        rental, payment = RentalService.create_rental(self.movie.id, user=self.user, promo_code='freewatch')

        self.assertIsNotNone(rental)
        self.assertEqual(rental.user, self.user)
        self.assertEqual(rental.amount, 0)
        self.assertEqual(rental.currency, 'LAK')
        self.assertEqual(rental.payment_method, 'free')
        self.assertEqual(rental.transaction_id, str(payment.id))
        self.assertAlmostEqual(
            (rental.expires_at - rental.purchased_at).total_seconds(), timedelta(hours=24).total_seconds()
        )

        self.assertEqual(payment.status, PaymentTransaction.STATUS_SUCCESS)
        self.assertEqual(payment.provider, 'free')
        self.assertEqual(payment.rental, rental)
        self.assertIsNotNone(payment.paid_at)

        promo.refresh_from_db()
        self.assertEqual(promo.uses_count, 1)
        self.assertTrue(PromoCodeUse.objects.filter(promo_code=promo, rental=rental).exists())

    def test_partial_discount_is_charged(self):
        PromoCodeFactory(code='TENOFF', discount_type='fixed', discount_value=10000)
        rental, payment = RentalService.create_rental(self.movie.id, user=self.user, promo_code='TENOFF')

        self.assertIsNone(rental)
        self.assertEqual(payment.amount_lak, 65000)
        self.assertEqual(payment.original_amount_lak, 75000)
        self.assertEqual(payment.promo_code.code, 'TENOFF')

    def test_anonymous_checkout(self):
        PromoCodeFactory(code='FREEWATCH', discount_type='free', discount_value=None)
        rental, payment = RentalService.create_rental(
            self.movie.id, anonymous_id='device-1', promo_code='FREEWATCH'
        )
        self.assertIsNone(rental.user)
        self.assertEqual(rental.anonymous_id, 'device-1')

    def test_requires_a_viewer(self):
        with self.assertRaises(MissingViewer):
            RentalService.create_rental(self.movie.id)

    def test_invalid_code(self):
        with self.assertRaises(InvalidPromoCode) as ctx:
            RentalService.create_rental(self.movie.id, user=self.user, promo_code='NOPE')
        self.assertEqual(ctx.exception.validation.error_code, 'not_found')
        self.assertFalse(PaymentTransaction.objects.exists())

    def test_unpriced_movie(self):
        movie = MovieFactory(pricing_tier=None)
        with self.assertRaises(MovieNotPurchasable):
            RentalService.create_rental(movie.id, user=self.user)

    def test_missing_movie(self):
        with self.assertRaises(MovieNotFound):
            RentalService.create_rental(uuid.uuid4(), user=self.user)

    def test_active_rental_blocks_checkout(self):
        RentalFactory(user=self.user, movie=self.movie)
        with self.assertRaises(ActiveRentalExists):
            RentalService.create_rental(self.movie.id, user=self.user)

    def test_expired_rental_allows_checkout(self):
        past = timezone.now() - timedelta(days=3)
        RentalFactory(user=self.user, movie=self.movie, purchased_at=past)
        rental, payment = RentalService.create_rental(self.movie.id, user=self.user)
        self.assertTrue(payment.is_pending)

    def test_confirm_grants_rental_and_redeems_code(self):
        promo = PromoCodeFactory(code='TENOFF', discount_type='fixed', discount_value=10000)
        _, payment = RentalService.create_rental(self.movie.id, user=self.user, promo_code='TENOFF')

        rental, payment = RentalService.complete_payment(payment.id)

        self.assertEqual(rental.amount, 65000)
        self.assertEqual(rental.payment_method, 'manual')
        self.assertEqual(payment.status, PaymentTransaction.STATUS_SUCCESS)
        self.assertEqual(payment.rental, rental)
        promo.refresh_from_db()
        self.assertEqual(promo.uses_count, 1)

    def test_confirm_twice(self):
        _, payment = RentalService.create_rental(self.movie.id, user=self.user)
        RentalService.complete_payment(payment.id)
        with self.assertRaises(PaymentNotPending):
            RentalService.complete_payment(payment.id)

    def test_confirm_when_code_ran_out(self):
        promo = PromoCodeFactory(code='LAST', discount_type='fixed', discount_value=1000, max_uses=1)
        _, payment = RentalService.create_rental(self.movie.id, user=self.user, promo_code='LAST')
        promo.uses_count = 1
        promo.save()

        with self.assertRaises(PromoCodeExhausted):
            RentalService.complete_payment(payment.id)

        payment.refresh_from_db()
        self.assertTrue(payment.is_pending)
        self.assertFalse(Rental.objects.exists())

    def test_confirm_unknown(self):
        with self.assertRaises(TransactionNotFound):
            RentalService.complete_payment(uuid.uuid4())

    def test_reject(self):
        _, payment = RentalService.create_rental(self.movie.id, user=self.user)
        payment = RentalService.reject_payment(payment.id, 'transfer not received')

        self.assertEqual(payment.status, PaymentTransaction.STATUS_FAILED)
        self.assertEqual(payment.provider_response['error'], 'transfer not received')
        with self.assertRaises(PaymentNotPending):
            RentalService.complete_payment(payment.id)

    def test_pending_payment_blocks_second_checkout(self):
        RentalService.create_rental(self.movie.id, user=self.user)

        with self.assertRaises(PendingPaymentExists):
            RentalService.create_rental(self.movie.id, user=self.user)
        self.assertEqual(PaymentTransaction.objects.count(), 1)

    def test_pending_anonymous_payment_blocks_second_checkout(self):
        RentalService.create_rental(self.movie.id, anonymous_id='device-1')

        with self.assertRaises(PendingPaymentExists):
            RentalService.create_rental(self.movie.id, anonymous_id='device-1')
        _, payment = RentalService.create_rental(self.movie.id, anonymous_id='device-2')
        self.assertTrue(payment.is_pending)

    def test_rejected_payment_allows_new_checkout(self):
        _, payment = RentalService.create_rental(self.movie.id, user=self.user)
        RentalService.reject_payment(payment.id)

        _, payment = RentalService.create_rental(self.movie.id, user=self.user)
        self.assertTrue(payment.is_pending)

    def test_confirm_refuses_when_movie_already_rented(self):
        promo = PromoCodeFactory(code='HALF50', discount_type='percentage', discount_value=50, max_uses=None)
        _, payment = RentalService.create_rental(self.movie.id, user=self.user, promo_code='HALF50')
        RentalFactory(user=self.user, movie=self.movie)

        with self.assertRaises(ActiveRentalExists):
            RentalService.complete_payment(payment.id)

        payment.refresh_from_db()
        self.assertTrue(payment.is_pending)
        self.assertEqual(Rental.objects.filter(user=self.user, movie=self.movie).count(), 1)
        promo.refresh_from_db()
        self.assertEqual(promo.uses_count, 0)
        self.assertFalse(PromoCodeUse.objects.exists())

    def test_get_active_rental(self):
        rental = RentalFactory(user=self.user, movie=self.movie)
        self.assertEqual(RentalService.get_active_rental(self.movie.id, self.user), rental)

    def test_get_active_rental_ignores_expired_and_other_viewers(self):
        RentalFactory(user=self.user, movie=self.movie, purchased_at=timezone.now() - timedelta(days=2))
        RentalFactory(user=UserFactory(), movie=self.movie)
        self.assertIsNone(RentalService.get_active_rental(self.movie.id, self.user))

    def test_get_active_rental_requires_a_viewer(self):
        with self.assertRaises(MissingViewer):
            RentalService.get_active_rental(self.movie.id)

    def test_list_active_rentals(self):
        active = RentalFactory(user=self.user, movie=self.movie)
        RentalFactory(user=self.user, purchased_at=timezone.now() - timedelta(days=2))
        RentalFactory(user=UserFactory())

        self.assertEqual(RentalService.list_active_rentals(self.user), [active])


@pytest.mark.django_db
class TestRentalEndpoints:

    def test_paid_checkout(self, viewer_client, priced_movie):
        response = viewer_client.post(f'/api/rentals/{priced_movie.id}', {}, format='json')

        assert response.status_code == 202
        transaction = response.json()['transaction']
        assert transaction['status'] == 'pending'
        assert transaction['amountLak'] == 75000
        assert 'rental' not in response.json()

    def test_free_checkout(self, viewer_client, priced_movie):
        PromoCodeFactory(code='FREEWATCH', discount_type='free', discount_value=None)
        response = viewer_client.post(
            f'/api/rentals/{priced_movie.id}', {'promoCode': 'FREEWATCH'}, format='json'
        )

        assert response.status_code == 201
        body = response.json()
        assert body['rental']['movieId'] == str(priced_movie.id)
        assert body['rental']['isActive'] is True
        assert body['transaction']['status'] == 'success'

    def test_anonymous_checkout(self, api_client, priced_movie):
        response = api_client.post(
            f'/api/rentals/{priced_movie.id}', {'anonymousId': 'device-9'}, format='json'
        )
        assert response.status_code == 202

    def test_checkout_without_viewer(self, api_client, priced_movie):
        response = api_client.post(f'/api/rentals/{priced_movie.id}', {}, format='json')
        assert response.status_code == 400

    def test_checkout_invalid_code(self, viewer_client, priced_movie):
        response = viewer_client.post(
            f'/api/rentals/{priced_movie.id}', {'promoCode': 'NOPE'}, format='json'
        )

        assert response.status_code == 400
        body = response.json()
        assert body['msg'] == 'code not found'
        assert body['errors']['validation']['errorCode'] == 'not_found'

    def test_checkout_unpriced(self, viewer_client, unpriced_movie):
        response = viewer_client.post(f'/api/rentals/{unpriced_movie.id}', {}, format='json')
        assert response.status_code == 400

    def test_checkout_missing_movie(self, viewer_client):
        response = viewer_client.post(f'/api/rentals/{uuid.uuid4()}', {}, format='json')
        assert response.status_code == 404

    def test_checkout_already_rented(self, viewer_client, viewer, priced_movie):
        RentalFactory(user=viewer, movie=priced_movie)
        response = viewer_client.post(f'/api/rentals/{priced_movie.id}', {}, format='json')
        assert response.status_code == 409

    def test_checkout_while_payment_pending(self, viewer_client, priced_movie):
        viewer_client.post(f'/api/rentals/{priced_movie.id}', {}, format='json')
        response = viewer_client.post(f'/api/rentals/{priced_movie.id}', {}, format='json')

        assert response.status_code == 409
        assert response.json()['code'] == 409

    def test_rental_status(self, viewer_client, viewer, priced_movie):
        rental = RentalFactory(user=viewer, movie=priced_movie)
        response = viewer_client.get(f'/api/rentals/{priced_movie.id}')

        assert response.status_code == 200
        body = response.json()['rental']
        assert body['id'] == str(rental.id)
        assert body['movieId'] == str(priced_movie.id)
        assert body['isActive'] is True

    def test_rental_status_anonymous(self, api_client, priced_movie):
        RentalFactory(user=None, anonymous_id='device-5', movie=priced_movie)
        response = api_client.get(f'/api/rentals/{priced_movie.id}', {'anonymousId': 'device-5'})
        assert response.status_code == 200

    def test_rental_status_expired(self, viewer_client, viewer, priced_movie):
        RentalFactory(user=viewer, movie=priced_movie, purchased_at=timezone.now() - timedelta(days=2))
        response = viewer_client.get(f'/api/rentals/{priced_movie.id}')
        assert response.status_code == 404

    def test_rental_status_without_viewer(self, api_client, priced_movie):
        assert api_client.get(f'/api/rentals/{priced_movie.id}').status_code == 400

    def test_list_rentals(self, viewer_client, viewer, priced_movie):
        RentalFactory(user=viewer, movie=priced_movie)
        response = viewer_client.get('/api/rentals')

        assert response.status_code == 200
        rentals = response.json()['rentals']
        assert len(rentals) == 1
        assert rentals[0]['movieId'] == str(priced_movie.id)

    def test_list_anonymous_rentals(self, api_client, priced_movie):
        RentalFactory(user=None, anonymous_id='device-5', movie=priced_movie)
        response = api_client.get('/api/rentals', {'anonymousId': 'device-5'})
        assert len(response.json()['rentals']) == 1

    def test_list_without_viewer(self, api_client):
        assert api_client.get('/api/rentals').status_code == 400


@pytest.mark.django_db
class TestAdminPaymentEndpoints:

    def _pending(self, movie):
        _, payment = RentalService.create_rental(movie.id, user=UserFactory())
        return payment

    def test_confirm(self, admin_client, priced_movie):
        payment = self._pending(priced_movie)
        response = admin_client.post(f'/api/admin/payments/{payment.id}/confirm')

        assert response.status_code == 200
        body = response.json()
        assert body['transaction']['status'] == 'success'
        assert body['rental']['amount'] == 75000

    def test_confirm_twice(self, admin_client, priced_movie):
        payment = self._pending(priced_movie)
        admin_client.post(f'/api/admin/payments/{payment.id}/confirm')
        response = admin_client.post(f'/api/admin/payments/{payment.id}/confirm')
        assert response.status_code == 409

    def test_confirm_when_already_rented(self, admin_client, priced_movie):
        payment = self._pending(priced_movie)
        RentalFactory(user=payment.user, movie=priced_movie)

        response = admin_client.post(f'/api/admin/payments/{payment.id}/confirm')

        assert response.status_code == 409
        payment.refresh_from_db()
        assert payment.is_pending

    def test_confirm_unknown(self, admin_client):
        response = admin_client.post(f'/api/admin/payments/{uuid.uuid4()}/confirm')
        assert response.status_code == 404

    def test_reject(self, admin_client, priced_movie):
        payment = self._pending(priced_movie)
        response = admin_client.post(
            f'/api/admin/payments/{payment.id}/reject', {'reason': 'no transfer'}, format='json'
        )

        assert response.status_code == 200
        assert response.json()['transaction']['status'] == 'failed'

    def test_requires_staff(self, viewer_client, priced_movie):
        payment = self._pending(priced_movie)
        response = viewer_client.post(f'/api/admin/payments/{payment.id}/confirm')
        assert response.status_code == 403
