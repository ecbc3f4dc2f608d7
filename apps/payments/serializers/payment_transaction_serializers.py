"""
Payment transaction serializers.
"""
from rest_framework import serializers
from ..models import PaymentTransaction


class PaymentTransactionSerializer(serializers.ModelSerializer):
    """
    Payment transaction as returned by rental checkout and admin confirmation.
    """
    movieId = serializers.UUIDField(source='movie_id', read_only=True)
    rentalId = serializers.UUIDField(source='rental_id', read_only=True, allow_null=True)
    amountLak = serializers.IntegerField(source='amount_lak', read_only=True)
    originalAmountLak = serializers.IntegerField(source='original_amount_lak', read_only=True, allow_null=True)
    promoCodeId = serializers.UUIDField(source='promo_code_id', read_only=True, allow_null=True)
    paidAt = serializers.DateTimeField(source='paid_at', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = PaymentTransaction
        fields = [
            'id', 'movieId', 'rentalId', 'provider', 'amountLak', 'originalAmountLak',
            'promoCodeId', 'status', 'paidAt', 'createdAt'
        ]
        read_only_fields = fields


class PaymentRejectSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True)
