"""
Promo code serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_percentage, validate_discount_window
from ..models import PromoCode


class PromoCodeSerializer(serializers.ModelSerializer):
    """Promo code as exposed to administrators"""
    discountType = serializers.CharField(source='discount_type')
    discountValue = serializers.IntegerField(source='discount_value', allow_null=True)
    maxUses = serializers.IntegerField(source='max_uses', allow_null=True)
    usesCount = serializers.IntegerField(source='uses_count')
    validFrom = serializers.DateTimeField(source='valid_from', allow_null=True)
    validTo = serializers.DateTimeField(source='valid_to', allow_null=True)
    movieId = serializers.UUIDField(source='movie_id', allow_null=True)
    isActive = serializers.BooleanField(source='is_active')
    createdAt = serializers.DateTimeField(source='created_at')

    class Meta:
        model = PromoCode
        fields = [
            'id', 'code', 'discountType', 'discountValue', 'maxUses', 'usesCount',
            'validFrom', 'validTo', 'movieId', 'isActive', 'createdAt'
        ]
        read_only_fields = fields


def validate_discount(discount_type, discount_value):
    """Check the value against the discount kind"""
    if discount_type == PromoCode.DISCOUNT_PERCENTAGE:
        if discount_value is None:
            raise serializers.ValidationError({
                'discountValue': 'discountValue is required for percentage and fixed discount types.'
            })
        try:
            validate_percentage(discount_value)
        except serializers.ValidationError as e:
            raise serializers.ValidationError({'discountValue': e.detail})
    elif discount_type == PromoCode.DISCOUNT_FIXED:
        if discount_value is None:
            raise serializers.ValidationError({
                'discountValue': 'discountValue is required for percentage and fixed discount types.'
            })
        if discount_value < 0:
            raise serializers.ValidationError({'discountValue': 'Fixed discount must be zero or more.'})


class PromoCodeCreateSerializer(serializers.Serializer):
    """
    Input for POST /api/admin/promo-codes.
    Code uniqueness and the movie lookup are handled by the view (409 / 404).
    """
    code = serializers.CharField(max_length=50)
    discountType = serializers.ChoiceField(source='discount_type', choices=PromoCode.DISCOUNT_TYPE_CHOICES)
    discountValue = serializers.IntegerField(source='discount_value', required=False, allow_null=True)
    maxUses = serializers.IntegerField(source='max_uses', required=False, allow_null=True, min_value=0)
    validFrom = serializers.DateTimeField(source='valid_from', required=False, allow_null=True)
    validTo = serializers.DateTimeField(source='valid_to', required=False, allow_null=True)
    movieId = serializers.UUIDField(source='movie_id', required=False, allow_null=True)
    isActive = serializers.BooleanField(source='is_active', required=False)

    def validate_code(self, value):
        normalized = PromoCode.normalize_code(value)
        if not normalized:
            raise serializers.ValidationError('Code may not be blank.')
        return normalized

    def validate(self, attrs):
        discount_type = attrs['discount_type']
        if discount_type == PromoCode.DISCOUNT_FREE:
            attrs['discount_value'] = None
        else:
            validate_discount(discount_type, attrs.get('discount_value'))
        validate_discount_window(attrs.get('valid_from'), attrs.get('valid_to'))
        return attrs


class PromoCodeUpdateSerializer(serializers.Serializer):
    """
    Input for PATCH /api/admin/promo-codes/<id>.

    Validated against the merged state of the stored code and the update, so
    changing only the type or only the value still honours the invariants.
    """
    discountType = serializers.ChoiceField(
        source='discount_type', choices=PromoCode.DISCOUNT_TYPE_CHOICES, required=False
    )
    discountValue = serializers.IntegerField(source='discount_value', required=False, allow_null=True)
    maxUses = serializers.IntegerField(source='max_uses', required=False, allow_null=True, min_value=0)
    validFrom = serializers.DateTimeField(source='valid_from', required=False, allow_null=True)
    validTo = serializers.DateTimeField(source='valid_to', required=False, allow_null=True)
    movieId = serializers.UUIDField(source='movie_id', required=False, allow_null=True)
    isActive = serializers.BooleanField(source='is_active', required=False)

    def validate(self, attrs):
        promo = self.instance

        def merged(field):
            return attrs[field] if field in attrs else getattr(promo, field)

        discount_type = merged('discount_type')
        if discount_type == PromoCode.DISCOUNT_FREE:
            if 'discount_value' in attrs or 'discount_type' in attrs:
                attrs['discount_value'] = None
        else:
            validate_discount(discount_type, merged('discount_value'))

        max_uses = merged('max_uses')
        if max_uses is not None and promo.uses_count > max_uses:
            raise serializers.ValidationError({
                'maxUses': f'maxUses cannot be lower than the current use count ({promo.uses_count}).'
            })

        validate_discount_window(merged('valid_from'), merged('valid_to'))
        return attrs
