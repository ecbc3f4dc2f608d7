"""
Serializers for resolved prices and promo code validation results.

Optional keys are left out of the payload when they have no value.
"""
from rest_framework import serializers

from .tier_serializers import PricingTierSerializer


class OmitEmptySerializer(serializers.Serializer):

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {key: value for key, value in data.items() if value is not None}


class PricingResultSerializer(OmitEmptySerializer):
    available = serializers.BooleanField()
    tier = PricingTierSerializer(allow_null=True)
    originalAmountLak = serializers.IntegerField(source='original_amount_lak', allow_null=True)
    finalAmountLak = serializers.IntegerField(source='final_amount_lak', allow_null=True)
    unavailableReason = serializers.CharField(source='unavailable_reason', allow_null=True)
    promoApplied = serializers.DictField(source='promo_applied', allow_null=True)


class PromoValidationSerializer(OmitEmptySerializer):
    valid = serializers.BooleanField()
    code = serializers.CharField()
    discountType = serializers.CharField(source='discount_type', allow_null=True)
    discountValue = serializers.IntegerField(source='discount_value', allow_null=True)
    discountAmountLak = serializers.IntegerField(source='discount_amount_lak', allow_null=True)
    finalAmountLak = serializers.IntegerField(source='final_amount_lak', allow_null=True)
    error = serializers.CharField(allow_null=True)
    errorCode = serializers.CharField(source='error_code', allow_null=True)


class PromoValidateRequestSerializer(serializers.Serializer):
    """Body of POST /api/promo-codes/validate"""
    code = serializers.CharField(max_length=50, trim_whitespace=True)
    movieId = serializers.UUIDField(source='movie_id')


class MovieTierAssignmentSerializer(serializers.Serializer):
    """Body of PATCH /api/admin/movies/<movieId>/pricing"""
    pricingTierId = serializers.UUIDField(source='pricing_tier_id', allow_null=True)
