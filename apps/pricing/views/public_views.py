"""
Public pricing views: price lookup and promo code validation.

Both are open to anonymous visitors.
"""
import logging

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.utils import error_response, first_error_message, not_found_response
from ..exceptions import MovieNotFound, MovieNotPurchasable
from ..serializers import PricingResultSerializer, PromoValidationSerializer, PromoValidateRequestSerializer
from ..services import PricingResolver

logger = logging.getLogger(__name__)


class MoviePricingView(APIView):
    """Resolved price of a movie - /api/movies/<movie_id>/pricing"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, movie_id):
        try:
            pricing = PricingResolver.resolve_pricing(movie_id)
        except MovieNotFound:
            return not_found_response('Movie not found')

        return Response({'pricing': PricingResultSerializer(pricing).data})


class PromoCodeValidateView(APIView):
    """Check a promo code against a movie - /api/promo-codes/validate"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = PromoValidateRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                first_error_message(serializer.errors, default='code and movieId are required'),
                errors=serializer.errors
            )

        data = serializer.validated_data
        try:
            validation = PricingResolver.validate_promo_code(data['code'], data['movie_id'])
        except MovieNotPurchasable as e:
            return error_response(str(e))

        return Response({'validation': PromoValidationSerializer(validation).data})
