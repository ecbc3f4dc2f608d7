"""
Payment serializers module.
"""
from .payment_transaction_serializers import PaymentTransactionSerializer, PaymentRejectSerializer

__all__ = [
    'PaymentTransactionSerializer',
    'PaymentRejectSerializer',
]
