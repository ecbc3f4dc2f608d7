"""
Rental checkout errors.
"""


class RentalError(Exception):
    """Base class for rental errors"""


class MissingViewer(RentalError):
    """Neither an authenticated user nor an anonymous id was supplied"""


class ActiveRentalExists(RentalError):
    """The viewer already has an unexpired rental of the movie"""


class InvalidPromoCode(RentalError):
    """The promo code supplied at checkout cannot be used"""

    def __init__(self, validation):
        super().__init__(validation.error)
        self.validation = validation


class PendingPaymentExists(ActiveRentalExists):
    """The viewer already has a payment awaiting confirmation for the movie"""
