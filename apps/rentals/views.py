import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.utils import conflict_response, error_response, first_error_message, not_found_response
from apps.payments.serializers import PaymentTransactionSerializer
from apps.pricing.exceptions import MovieNotFound, MovieNotPurchasable, PromoCodeExhausted
from apps.pricing.serializers import PromoValidationSerializer
from .exceptions import ActiveRentalExists, InvalidPromoCode, MissingViewer
from .serializers import RentalSerializer, RentalCheckoutSerializer
from .services import RentalService

logger = logging.getLogger(__name__)


class RentalListView(APIView):
    """Active rentals of the caller - /api/rentals"""
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            rentals = RentalService.list_active_rentals(request.user, request.query_params.get('anonymousId'))
        except MissingViewer as e:
            return error_response(str(e))

        return Response({'rentals': RentalSerializer(rentals, many=True).data})


class RentalCheckoutView(APIView):
    """Rental status and checkout for a movie - /api/rentals/<movie_id>"""
    permission_classes = [AllowAny]

    def get(self, request, movie_id):
        try:
            rental = RentalService.get_active_rental(movie_id, request.user, request.query_params.get('anonymousId'))
        except MissingViewer as e:
            return error_response(str(e))

        if rental is None:
            return not_found_response('No active rental for this movie')
        return Response({'rental': RentalSerializer(rental).data})

    def post(self, request, movie_id):
        serializer = RentalCheckoutSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        data = serializer.validated_data
        try:
            rental, payment = RentalService.create_rental(
                movie_id,
                user=request.user,
                anonymous_id=data.get('anonymous_id'),
                promo_code=data.get('promo_code') or None,
            )
        except MissingViewer as e:
            return error_response(str(e))
        except MovieNotFound:
            return not_found_response('Movie not found')
        except MovieNotPurchasable as e:
            return error_response(str(e))
        except InvalidPromoCode as e:
            return error_response(
                e.validation.error,
                errors={'validation': PromoValidationSerializer(e.validation).data}
            )
        except ActiveRentalExists as e:
            return conflict_response(str(e))
        except PromoCodeExhausted:
            return conflict_response('usage limit reached')

        if rental is not None:
            return Response(
                {
                    'rental': RentalSerializer(rental).data,
                    'transaction': PaymentTransactionSerializer(payment).data,
                },
                status=status.HTTP_201_CREATED
            )

        return Response(
            {'transaction': PaymentTransactionSerializer(payment).data},
            status=status.HTTP_202_ACCEPTED
        )
