import logging
from datetime import timedelta
from typing import List, Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.payments.exceptions import PaymentNotPending, TransactionNotFound
from apps.payments.models import PaymentTransaction
from apps.payments.services import get_available_provider, get_provider
from apps.pricing.exceptions import MovieNotPurchasable
from apps.pricing.services import PricingResolver, PromoRedemptionService
from apps.movies.models import Movie
from ..exceptions import ActiveRentalExists, InvalidPromoCode, MissingViewer, PendingPaymentExists
from ..models import Rental

logger = logging.getLogger(__name__)


def _viewer(user, anonymous_id):
    """Return (user or None, anonymous id or None) for the caller"""
    if user is not None and user.is_authenticated:
        return user, None
    anonymous_id = (anonymous_id or '').strip() or None
    if anonymous_id is None:
        raise MissingViewer("Sign in or provide an anonymousId to rent")
    return None, anonymous_id


class RentalService:
    """Checkout and fulfilment of movie rentals"""

    @staticmethod
    def has_active_rental(movie_id, user=None, anonymous_id=None, now=None) -> bool:
        return Rental.objects.for_viewer(user, anonymous_id).active(now).filter(movie_id=movie_id).exists()

    @staticmethod
    def get_active_rental(movie_id, user=None, anonymous_id=None, now=None) -> Optional[Rental]:
        """The caller's unexpired rental of a movie, or None"""
        user, anonymous_id = _viewer(user, anonymous_id)
        return (
            Rental.objects.for_viewer(user, anonymous_id)
            .active(now)
            .filter(movie_id=movie_id)
            .order_by('-expires_at')
            .first()
        )

    @staticmethod
    def has_pending_payment(movie_id, user=None, anonymous_id=None) -> bool:
        payments = PaymentTransaction.objects.filter(movie_id=movie_id, status=PaymentTransaction.STATUS_PENDING)
        if user is not None and user.is_authenticated:
            return payments.filter(user=user).exists()
        return payments.filter(user__isnull=True, anonymous_id=anonymous_id).exists()

    @staticmethod
    def list_active_rentals(user=None, anonymous_id=None, now=None) -> List[Rental]:
        user, anonymous_id = _viewer(user, anonymous_id)
        return list(
            Rental.objects.for_viewer(user, anonymous_id)
            .active(now)
            .select_related('movie')
            .order_by('-purchased_at')
        )

    @staticmethod
    def create_rental(movie_id, user=None, anonymous_id=None,
                      promo_code: Optional[str] = None) -> Tuple[Optional[Rental], PaymentTransaction]:
        """
        Price a movie for the caller and open a payment for it.

        Free checkouts are fulfilled straight away and return the new rental.
        Paid checkouts return (None, pending transaction).

        Raises:
            MissingViewer: no user and no anonymous id
            MovieNotFound: the movie does not exist
            MovieNotPurchasable: the movie has no active price
            InvalidPromoCode: the promo code was rejected
            ActiveRentalExists: the caller can already watch the movie
            PendingPaymentExists: the caller already has a payment awaiting confirmation
            PromoCodeExhausted: the code ran out of uses during checkout
        """
        user, anonymous_id = _viewer(user, anonymous_id)

        pricing, validation = PricingResolver.resolve_price_with_promo(movie_id, promo_code)
        if not pricing.available:
            raise MovieNotPurchasable("movie has no pricing")
        if validation is not None and not validation.valid:
            raise InvalidPromoCode(validation)

        final_amount = pricing.final_amount_lak
        provider = get_available_provider(final_amount)

        with transaction.atomic():
            RentalService._lock_movie(movie_id)
            RentalService._ensure_not_owned(movie_id, user, anonymous_id)
            if RentalService.has_pending_payment(movie_id, user, anonymous_id):
                raise PendingPaymentExists("A payment for this movie is already awaiting confirmation")

            payment = PaymentTransaction.objects.create(
                movie_id=movie_id,
                user=user,
                anonymous_id=anonymous_id,
                provider=provider.name,
                amount_lak=final_amount,
                original_amount_lak=pricing.original_amount_lak,
                promo_code=validation.promo_code if validation else None,
            )

            intent = provider.create_payment(str(payment.id), final_amount)
            payment.provider_transaction_id = intent.provider_transaction_id or ''
            payment.provider_response = {'status': intent.status, **intent.extra}
            payment.save(update_fields=['provider_transaction_id', 'provider_response', 'updated_at'])

            rental = None
            if intent.immediate_success:
                rental = RentalService._fulfil(payment)

        logger.info(
            f"Checkout {payment.id} for movie {movie_id}: {final_amount} LAK via {provider.name} "
            f"({'completed' if rental else 'pending'})"
        )
        return rental, payment

    @staticmethod
    def complete_payment(transaction_id) -> Tuple[Rental, PaymentTransaction]:
        """
        Confirm a pending manual payment and grant the rental.

        Raises:
            TransactionNotFound: unknown transaction
            PaymentNotPending: the transaction was already settled
            ActiveRentalExists: the viewer was granted the movie since checkout
            PromoCodeExhausted: the promo code ran out of uses since checkout
        """
        with transaction.atomic():
            payment = RentalService._lock_pending(transaction_id)
            RentalService._lock_movie(payment.movie_id)

            provider = get_provider(payment.provider)
            if provider is not None and hasattr(provider, 'confirm_payment'):
                result = provider.confirm_payment(str(payment.id))
                payment.provider_response = {**payment.provider_response, 'status': result.status}

            rental = RentalService._fulfil(payment)

        logger.info(f"Payment {payment.id} confirmed, rental {rental.id} granted")
        return rental, payment

    @staticmethod
    def reject_payment(transaction_id, reason: Optional[str] = None) -> PaymentTransaction:
        """
        Mark a pending manual payment as failed.

        Raises:
            TransactionNotFound: unknown transaction
            PaymentNotPending: the transaction was already settled
        """
        with transaction.atomic():
            payment = RentalService._lock_pending(transaction_id)

            provider = get_provider(payment.provider)
            error = reason or 'Payment rejected by admin'
            if provider is not None and hasattr(provider, 'reject_payment'):
                error = provider.reject_payment(str(payment.id), reason).error

            payment.status = PaymentTransaction.STATUS_FAILED
            payment.provider_response = {**payment.provider_response, 'status': 'failed', 'error': error}
            payment.save(update_fields=['status', 'provider_response', 'updated_at'])

        logger.info(f"Payment {payment.id} rejected: {error}")
        return payment

    @staticmethod
    def _lock_pending(transaction_id) -> PaymentTransaction:
        payment = PaymentTransaction.objects.select_for_update().filter(pk=transaction_id).first()
        if payment is None:
            raise TransactionNotFound(f"Transaction {transaction_id} not found")
        if not payment.is_pending:
            raise PaymentNotPending(f"Transaction {transaction_id} is already {payment.status}")
        return payment

    @staticmethod
    def _lock_movie(movie_id):
        # Serializes checkouts and confirmations of the same movie
        Movie.objects.select_for_update().filter(pk=movie_id).first()

    @staticmethod
    def _ensure_not_owned(movie_id, user, anonymous_id):
        if RentalService.has_active_rental(movie_id, user, anonymous_id):
            raise ActiveRentalExists("You already have an active rental for this movie")

    @staticmethod
    def _fulfil(payment: PaymentTransaction) -> Rental:
        """Create the rental for a paid transaction. Must run inside a transaction."""
        RentalService._ensure_not_owned(payment.movie_id, payment.user, payment.anonymous_id)

        now = timezone.now()
        rental = Rental.objects.create(
            user=payment.user,
            anonymous_id=payment.anonymous_id,
            movie_id=payment.movie_id,
            purchased_at=now,
            expires_at=now + timedelta(hours=settings.RENTAL_DURATION_HOURS),
            transaction_id=str(payment.id),
            amount=payment.amount_lak,
            currency=settings.RENTAL_CURRENCY,
            payment_method=payment.provider,
        )

        if payment.promo_code_id:
            PromoRedemptionService.redeem(
                payment.promo_code, rental, user=payment.user, anonymous_id=payment.anonymous_id
            )

        payment.rental = rental
        payment.status = PaymentTransaction.STATUS_SUCCESS
        payment.paid_at = now
        payment.save(update_fields=['rental', 'status', 'paid_at', 'provider_response', 'updated_at'])
        return rental
