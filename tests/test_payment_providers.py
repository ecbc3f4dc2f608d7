"""
Tests for payment providers
"""
import pytest

from apps.payments.services import (
    FreeProvider, ManualProvider, free_provider, manual_provider,
    get_provider, get_available_provider, list_providers
)


class TestProviderSelection:

    def test_zero_amount_uses_free_provider(self):
        assert get_available_provider(0) is free_provider

    def test_paid_amount_uses_manual_provider(self):
        assert get_available_provider(75000) is manual_provider

    def test_lookup_by_name(self):
        assert get_provider('free') is free_provider
        assert get_provider('manual') is manual_provider
        assert get_provider('bcel') is None

    def test_negative_amount_has_no_provider(self):
        with pytest.raises(ValueError):
            get_available_provider(-1)

    def test_list_providers(self):
        names = [p['name'] for p in list_providers()]
        assert names == ['free', 'manual']
        assert all(p['available'] for p in list_providers())


class TestFreeProvider:

    def test_immediate_success(self):
        intent = FreeProvider().create_payment('txn-1', 0)
        assert intent.immediate_success
        assert intent.status == 'success'

    def test_refuses_non_zero_amount(self):
        with pytest.raises(ValueError):
            FreeProvider().create_payment('txn-1', 1000)

    def test_can_handle(self):
        assert FreeProvider().can_handle(0)
        assert not FreeProvider().can_handle(1)

    def test_status_is_success(self):
        result = FreeProvider().get_payment_status('txn-1')
        assert result.status == 'success'
        assert result.paid_at is not None


class TestManualProvider:

    def test_payment_stays_pending(self):
        intent = ManualProvider().create_payment('txn-2', 75000)
        assert not intent.immediate_success
        assert intent.status == 'pending'

    def test_confirm(self):
        result = ManualProvider().confirm_payment('txn-2')
        assert result.status == 'success'
        assert result.paid_at is not None

    def test_reject_with_reason(self):
        result = ManualProvider().reject_payment('txn-2', 'transfer not received')
        assert result.status == 'failed'
        assert result.error == 'transfer not received'

    def test_reject_default_reason(self):
        result = ManualProvider().reject_payment('txn-2')
        assert result.error == 'Payment rejected by admin'

    def test_can_handle_any_non_negative_amount(self):
        assert ManualProvider().can_handle(0)
        assert ManualProvider().can_handle(75000)
        assert not ManualProvider().can_handle(-1)

    def test_status_stays_pending(self):
        result = ManualProvider().get_payment_status('txn-2')
        assert result.status == 'pending'
        assert result.paid_at is None
