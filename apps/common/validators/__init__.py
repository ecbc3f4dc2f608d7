"""
Common validators module.
"""
from .price_validators import (
    validate_amount_lak, validate_percentage, validate_discount_window
)

__all__ = [
    'validate_amount_lak',
    'validate_percentage',
    'validate_discount_window',
]
