"""
Payment models module.
"""
from .payment_transaction import PaymentTransaction

__all__ = [
    'PaymentTransaction',
]
