"""
Pricing errors.

Only structural problems are raised. An unusable promo code is reported as a
PromoValidation with valid=False instead.
"""


class PricingError(Exception):
    """Base class for pricing errors"""


class MovieNotFound(PricingError):
    """The referenced movie does not exist"""


class MovieNotPurchasable(PricingError):
    """The movie has no active pricing tier"""


class PromoCodeExhausted(PricingError):
    """The promo code could not be redeemed: inactive or its use limit was reached"""


class PromoCodeAlreadyRedeemed(PricingError):
    """The promo code has already been redeemed for this rental"""
