from rest_framework import serializers
from .models import Rental


class RentalSerializer(serializers.ModelSerializer):
    """Rental as returned to the viewer"""
    movieId = serializers.UUIDField(source='movie_id', read_only=True)
    movieTitle = serializers.CharField(source='movie.display_title', read_only=True)
    purchasedAt = serializers.DateTimeField(source='purchased_at', read_only=True)
    expiresAt = serializers.DateTimeField(source='expires_at', read_only=True)
    transactionId = serializers.CharField(source='transaction_id', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = Rental
        fields = [
            'id', 'movieId', 'movieTitle', 'purchasedAt', 'expiresAt', 'transactionId',
            'amount', 'currency', 'paymentMethod', 'isActive'
        ]
        read_only_fields = fields


class RentalCheckoutSerializer(serializers.Serializer):
    """Body of POST /api/rentals/<movie_id>"""
    promoCode = serializers.CharField(source='promo_code', max_length=50, required=False, allow_blank=True)
    anonymousId = serializers.CharField(source='anonymous_id', max_length=100, required=False, allow_blank=True)
