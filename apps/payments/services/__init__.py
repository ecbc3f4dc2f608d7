"""
Payment services module.
"""
from .providers import (
    PaymentProvider, FreeProvider, ManualProvider, PaymentIntent, PaymentStatusResult,
    free_provider, manual_provider, get_provider, get_available_provider, list_providers
)

__all__ = [
    'PaymentProvider',
    'FreeProvider',
    'ManualProvider',
    'PaymentIntent',
    'PaymentStatusResult',
    'free_provider',
    'manual_provider',
    'get_provider',
    'get_available_provider',
    'list_providers',
]
