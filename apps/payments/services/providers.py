"""
Payment providers.

A provider turns a priced rental into a payment intent. Free rentals succeed
immediately; paid rentals stay pending until an administrator confirms the
payment (bank transfer, cash).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from django.utils import timezone


@dataclass
class PaymentIntent:
    transaction_id: str
    status: str
    immediate_success: bool = False
    provider_transaction_id: Optional[str] = None
    redirect_url: Optional[str] = None
    expires_at: Optional[datetime] = None
    extra: Dict = field(default_factory=dict)


@dataclass
class PaymentStatusResult:
    transaction_id: str
    status: str
    paid_at: Optional[datetime] = None
    error: Optional[str] = None


class PaymentProvider:
    """Base class for payment providers"""

    name = ''
    display_name = ''

    def is_available(self) -> bool:
        return True

    def can_handle(self, amount_lak: int) -> bool:
        raise NotImplementedError

    def create_payment(self, transaction_id: str, amount_lak: int) -> PaymentIntent:
        raise NotImplementedError

    def get_payment_status(self, transaction_id: str) -> PaymentStatusResult:
        raise NotImplementedError


class FreeProvider(PaymentProvider):
    """Zero-amount payments, e.g. rentals fully covered by a promo code"""

    name = 'free'
    display_name = 'Free (Promotional)'

    def can_handle(self, amount_lak: int) -> bool:
        return amount_lak == 0

    def create_payment(self, transaction_id: str, amount_lak: int) -> PaymentIntent:
        if amount_lak != 0:
            raise ValueError("FreeProvider can only handle zero-amount payments")

        return PaymentIntent(
            transaction_id=transaction_id,
            status='success',
            immediate_success=True,
        )

    def get_payment_status(self, transaction_id: str) -> PaymentStatusResult:
        return PaymentStatusResult(
            transaction_id=transaction_id,
            status='success',
            paid_at=timezone.now(),
        )


class ManualProvider(PaymentProvider):
    """Admin-confirmed payments. Stays pending until confirmed or rejected."""

    name = 'manual'
    display_name = 'Manual Confirmation'

    def can_handle(self, amount_lak: int) -> bool:
        return amount_lak >= 0

    def create_payment(self, transaction_id: str, amount_lak: int) -> PaymentIntent:
        return PaymentIntent(
            transaction_id=transaction_id,
            status='pending',
        )

    def get_payment_status(self, transaction_id: str) -> PaymentStatusResult:
        # The stored transaction is the source of truth for manual payments
        return PaymentStatusResult(
            transaction_id=transaction_id,
            status='pending',
        )

    def confirm_payment(self, transaction_id: str) -> PaymentStatusResult:
        return PaymentStatusResult(
            transaction_id=transaction_id,
            status='success',
            paid_at=timezone.now(),
        )

    def reject_payment(self, transaction_id: str, reason: Optional[str] = None) -> PaymentStatusResult:
        return PaymentStatusResult(
            transaction_id=transaction_id,
            status='failed',
            error=reason or 'Payment rejected by admin',
        )


free_provider = FreeProvider()
manual_provider = ManualProvider()

providers: List[PaymentProvider] = [
    free_provider,
    manual_provider,
]


def get_provider(name: str) -> Optional[PaymentProvider]:
    """Get a provider by name"""
    for provider in providers:
        if provider.name == name:
            return provider
    return None


def get_available_provider(amount_lak: int) -> PaymentProvider:
    """Pick the first available provider that accepts the amount"""
    for provider in providers:
        if provider.is_available() and provider.can_handle(amount_lak):
            return provider
    raise ValueError(f"No payment provider can handle {amount_lak} LAK")


def list_providers() -> List[Dict]:
    """List all providers with their availability"""
    return [
        {
            'name': provider.name,
            'displayName': provider.display_name,
            'available': provider.is_available(),
        }
        for provider in providers
    ]
