"""
Pricing tier serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_amount_lak
from ..models import PricingTier


class PricingTierSerializer(serializers.ModelSerializer):
    """
    Pricing tier as exposed by the API (camelCase keys).
    Also used nested inside resolved pricing.
    """
    displayNameEn = serializers.CharField(source='display_name_en')
    displayNameLo = serializers.CharField(source='display_name_lo', allow_null=True)
    priceLak = serializers.IntegerField(source='price_lak')
    isActive = serializers.BooleanField(source='is_active')
    sortOrder = serializers.IntegerField(source='sort_order')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')

    class Meta:
        model = PricingTier
        fields = [
            'id', 'name', 'displayNameEn', 'displayNameLo', 'priceLak',
            'isActive', 'sortOrder', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class PricingTierCreateSerializer(serializers.Serializer):
    """
    Input for POST /api/admin/pricing/tiers.
    Name uniqueness is checked by the view so it can answer 409.
    """
    name = serializers.CharField(max_length=50)
    displayNameEn = serializers.CharField(max_length=100, source='display_name_en')
    displayNameLo = serializers.CharField(
        max_length=100, source='display_name_lo', required=False, allow_null=True, allow_blank=True
    )
    priceLak = serializers.IntegerField(source='price_lak', validators=[validate_amount_lak])
    isActive = serializers.BooleanField(source='is_active', required=False)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)

    def validate(self, attrs):
        if not attrs.get('display_name_lo'):
            attrs['display_name_lo'] = None
        return attrs


class PricingTierUpdateSerializer(serializers.Serializer):
    """Input for PATCH /api/admin/pricing/tiers/<id>; every field optional"""
    name = serializers.CharField(max_length=50, required=False)
    displayNameEn = serializers.CharField(max_length=100, source='display_name_en', required=False)
    displayNameLo = serializers.CharField(
        max_length=100, source='display_name_lo', required=False, allow_null=True, allow_blank=True
    )
    priceLak = serializers.IntegerField(source='price_lak', required=False, validators=[validate_amount_lak])
    isActive = serializers.BooleanField(source='is_active', required=False)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)

    def validate(self, attrs):
        if 'display_name_lo' in attrs and not attrs['display_name_lo']:
            attrs['display_name_lo'] = None
        return attrs
