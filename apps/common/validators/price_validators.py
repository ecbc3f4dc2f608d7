"""
Price and discount validators.
"""
from rest_framework import serializers


def validate_amount_lak(value, min_value=0, max_value=None):
    """
    Validate an amount in Lao Kip.

    Amounts are whole kip: the currency is used without subdivision.

    Raises:
        serializers.ValidationError: If the amount is outside the valid range

    Returns:
        int: Validated amount
    """
    if value < min_value:
        raise serializers.ValidationError(f"Amount must be at least {min_value}.")

    if max_value is not None and value > max_value:
        raise serializers.ValidationError(f"Amount must not exceed {max_value}.")

    return value


def validate_percentage(value):
    """
    Validate a percentage discount: 0 < value <= 100.
    """
    if value is None or value <= 0 or value > 100:
        raise serializers.ValidationError("Percentage discount must be greater than 0 and at most 100.")
    return value


def validate_discount_window(valid_from, valid_to):
    """
    Validate that a validity window is not inverted.

    This is an object-level validator for use in a serializer's validate() method.
    """
    if valid_from and valid_to and valid_from > valid_to:
        raise serializers.ValidationError({
            'validTo': 'validTo must be after validFrom.'
        })
