"""
Pricing resolver.

Answers "can this movie be rented, and for how much", optionally with a promo
code applied. Nothing here writes to the database; redemption lives in
redemption.py.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.movies.models import Movie
from ..exceptions import MovieNotFound, MovieNotPurchasable
from ..models import PricingTier, PromoCode

logger = logging.getLogger(__name__)

UNAVAILABLE_NO_PRICING = 'no_pricing'

# errorCode -> human readable message
PROMO_ERRORS = {
    'not_found': 'code not found',
    'inactive': 'code inactive',
    'not_yet_valid': 'code not yet valid',
    'expired': 'code expired',
    'usage_limit_reached': 'usage limit reached',
    'not_applicable': 'code not valid for this movie',
    'invalid_configuration': 'invalid code configuration',
}


@dataclass
class PricingResult:
    available: bool
    tier: Optional[PricingTier] = None
    original_amount_lak: Optional[int] = None
    final_amount_lak: Optional[int] = None
    unavailable_reason: Optional[str] = None
    promo_applied: Optional[dict] = None


@dataclass
class PromoValidation:
    valid: bool
    code: str
    discount_type: Optional[str] = None
    discount_value: Optional[int] = None
    discount_amount_lak: Optional[int] = None
    final_amount_lak: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    promo_code: Optional[PromoCode] = None

    @classmethod
    def rejected(cls, code, error_code):
        return cls(valid=False, code=code, error=PROMO_ERRORS[error_code], error_code=error_code)


@dataclass(frozen=True)
class Discount:
    discount_amount_lak: int
    final_amount_lak: int


def calculate_discount(discount_type, discount_value, original_amount_lak):
    """
    Apply a discount to an amount in kip.

    Percentage discounts are floored so no fractional kip is ever produced, and
    fixed discounts are clamped so the final amount never drops below zero.

    Raises:
        ValueError: unknown discount type, or a missing value for a
            percentage or fixed discount
    """
    if discount_type == PromoCode.DISCOUNT_FREE:
        return Discount(discount_amount_lak=original_amount_lak, final_amount_lak=0)

    if discount_value is None:
        raise ValueError(f"{discount_type} discount requires a value")

    if discount_type == PromoCode.DISCOUNT_PERCENTAGE:
        discount = original_amount_lak * discount_value // 100
    elif discount_type == PromoCode.DISCOUNT_FIXED:
        discount = min(discount_value, original_amount_lak)
    else:
        raise ValueError(f"Unknown discount type: {discount_type}")

    discount = max(0, min(discount, original_amount_lak))
    return Discount(discount_amount_lak=discount, final_amount_lak=original_amount_lak - discount)


class PricingResolver:
    """Resolves movie prices and evaluates promo codes against them"""

    @staticmethod
    def get_movie(movie_id):
        try:
            return Movie.objects.select_related('pricing_tier').get(pk=movie_id)
        except (Movie.DoesNotExist, ValidationError):
            raise MovieNotFound(f"Movie {movie_id} not found")

    @staticmethod
    def resolve_pricing(movie_id):
        """
        Resolve the rental price of a movie.

        Raises:
            MovieNotFound: if the movie does not exist
        """
        movie = PricingResolver.get_movie(movie_id)
        return PricingResolver.resolve_for_movie(movie)

    @staticmethod
    def resolve_for_movie(movie):
        tier = movie.pricing_tier
        if tier is None or not tier.is_active:
            return PricingResult(available=False, unavailable_reason=UNAVAILABLE_NO_PRICING)

        return PricingResult(
            available=True,
            tier=tier,
            original_amount_lak=tier.price_lak,
            final_amount_lak=tier.price_lak,
        )

    @staticmethod
    def validate_promo_code(code, movie_id, now=None):
        """
        Check a user supplied promo code against a movie's current price.

        Raises:
            MovieNotPurchasable: if the movie is missing or has no active price
        """
        try:
            pricing = PricingResolver.resolve_pricing(movie_id)
        except MovieNotFound:
            raise MovieNotPurchasable("movie has no pricing")
        if not pricing.available:
            raise MovieNotPurchasable("movie has no pricing")

        return PricingResolver.evaluate_promo_code(code, movie_id, pricing.original_amount_lak, now=now)

    @staticmethod
    def evaluate_promo_code(code, movie_id, original_amount_lak, now=None):
        now = now or timezone.now()
        normalized = PromoCode.normalize_code(code)

        promo = PromoCode.objects.filter(code=normalized).first() if normalized else None
        rejection = PricingResolver._check_usable(promo, movie_id, now)
        if rejection:
            logger.info(f"Promo code {normalized!r} rejected for movie {movie_id}: {rejection}")
            return PromoValidation.rejected(code, rejection)

        try:
            discount = calculate_discount(promo.discount_type, promo.discount_value, original_amount_lak)
        except ValueError as e:
            logger.warning(f"Promo code {promo.code} is misconfigured: {e}")
            return PromoValidation.rejected(code, 'invalid_configuration')

        return PromoValidation(
            valid=True,
            code=promo.code,
            discount_type=promo.discount_type,
            discount_value=promo.discount_value,
            discount_amount_lak=discount.discount_amount_lak,
            final_amount_lak=discount.final_amount_lak,
            promo_code=promo,
        )

    @staticmethod
    def _check_usable(promo, movie_id, now):
        """Return the errorCode that disqualifies the code, or None"""
        if promo is None:
            return 'not_found'
        if not promo.is_active:
            return 'inactive'
        if promo.valid_from and now < promo.valid_from:
            return 'not_yet_valid'
        if promo.valid_to and now > promo.valid_to:
            return 'expired'
        if promo.is_exhausted:
            return 'usage_limit_reached'
        if promo.movie_id and str(promo.movie_id) != str(movie_id):
            return 'not_applicable'
        return None

    @staticmethod
    def resolve_price_with_promo(movie_id, code=None, now=None):
        """
        Resolve a movie's price and, when a valid code is given, apply it.

        An invalid code leaves the price untouched; the validation is
        returned alongside so callers can report why.

        Returns:
            tuple: (PricingResult, PromoValidation or None)
        """
        pricing = PricingResolver.resolve_pricing(movie_id)
        if not pricing.available or not code:
            return pricing, None

        validation = PricingResolver.evaluate_promo_code(code, movie_id, pricing.original_amount_lak, now=now)
        if validation.valid:
            pricing.final_amount_lak = validation.final_amount_lak
            pricing.promo_applied = {
                'id': str(validation.promo_code.id),
                'code': validation.code,
                'discountType': validation.discount_type,
                'discountValue': validation.discount_value,
                'discountAmountLak': validation.discount_amount_lak,
            }
        return pricing, validation
