"""
Payment errors.
"""


class PaymentError(Exception):
    """Base class for payment errors"""


class TransactionNotFound(PaymentError):
    """The referenced payment transaction does not exist"""


class PaymentNotPending(PaymentError):
    """The transaction was already completed or rejected"""
