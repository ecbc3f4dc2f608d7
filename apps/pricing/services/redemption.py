"""
Promo code redemption.

The use-count increment and the limit check happen in one conditional UPDATE,
so concurrent checkouts can never push uses_count past max_uses.
"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import F, Q

from ..exceptions import PromoCodeAlreadyRedeemed, PromoCodeExhausted
from ..models import PromoCode, PromoCodeUse

logger = logging.getLogger(__name__)


class PromoRedemptionService:
    """Records the use of a promo code by a rental"""

    @staticmethod
    def redeem(promo_code, rental, user=None, anonymous_id=None):
        """
        Redeem ``promo_code`` for ``rental``.

        Raises:
            PromoCodeExhausted: the code is inactive or has no uses left
            PromoCodeAlreadyRedeemed: the rental already redeemed this code
        """
        if user is not None and not user.is_authenticated:
            user = None

        with transaction.atomic():
            if PromoCodeUse.objects.filter(promo_code=promo_code, rental=rental).exists():
                raise PromoCodeAlreadyRedeemed(f"{promo_code.code} already redeemed for rental {rental.id}")

            updated = PromoCode.objects.filter(
                pk=promo_code.pk,
                is_active=True,
            ).filter(
                Q(max_uses__isnull=True) | Q(uses_count__lt=F('max_uses'))
            ).update(uses_count=F('uses_count') + 1)

            if updated == 0:
                logger.warning(f"Promo code {promo_code.code} could not be redeemed: exhausted or inactive")
                raise PromoCodeExhausted(f"{promo_code.code} has no uses left")

            try:
                with transaction.atomic():
                    use = PromoCodeUse.objects.create(
                        promo_code=promo_code,
                        rental=rental,
                        user=user,
                        anonymous_id=anonymous_id,
                    )
            except IntegrityError:
                raise PromoCodeAlreadyRedeemed(f"{promo_code.code} already redeemed for rental {rental.id}")

        promo_code.refresh_from_db(fields=['uses_count'])
        logger.info(f"Promo code {promo_code.code} redeemed for rental {rental.id} ({promo_code.uses_count} uses)")
        return use
