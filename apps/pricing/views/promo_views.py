"""
Admin promo code views.
"""
import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.audit import AuditService, diff_changes, snapshot
from apps.common.utils import conflict_response, error_response, first_error_message, not_found_response
from apps.movies.models import Movie
from ..models import PromoCode
from ..serializers import PromoCodeSerializer, PromoCodeCreateSerializer, PromoCodeUpdateSerializer

logger = logging.getLogger(__name__)

AUDITED_FIELDS = [
    'code', 'discount_type', 'discount_value', 'max_uses',
    'valid_from', 'valid_to', 'movie_id', 'is_active'
]


class AdminPromoCodeListView(APIView):
    """List and create promo codes - /api/admin/promo-codes"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        codes = PromoCode.objects.order_by('-created_at')
        return Response({'promoCodes': PromoCodeSerializer(codes, many=True).data})

    def post(self, request):
        serializer = PromoCodeCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        data = serializer.validated_data
        if PromoCode.objects.filter(code=data['code']).exists():
            return conflict_response('A promo code with this code already exists')

        movie_id = data.get('movie_id')
        if movie_id and not Movie.objects.filter(pk=movie_id).exists():
            return not_found_response('Movie not found')

        promo = PromoCode.objects.create(**data)
        logger.info(f"Promo code {promo.code} created ({promo.discount_type})")

        AuditService.log(
            request, 'create', 'promo_code', promo.id, promo.code,
            changes=diff_changes({}, snapshot(promo, AUDITED_FIELDS))
        )
        return Response({'promoCode': PromoCodeSerializer(promo).data}, status=status.HTTP_201_CREATED)


class AdminPromoCodeDetailView(APIView):
    """Update and delete a promo code - /api/admin/promo-codes/<id>"""
    permission_classes = [IsAdminUser]

    def patch(self, request, promo_id):
        promo = PromoCode.objects.filter(pk=promo_id).first()
        if promo is None:
            return not_found_response('Promo code not found')

        serializer = PromoCodeUpdateSerializer(promo, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        updates = serializer.validated_data
        movie_id = updates.get('movie_id')
        if movie_id and not Movie.objects.filter(pk=movie_id).exists():
            return not_found_response('Movie not found')

        before = snapshot(promo, AUDITED_FIELDS)
        for field, value in updates.items():
            setattr(promo, field, value)
        promo.save()

        changes = diff_changes(before, snapshot(promo, AUDITED_FIELDS))
        if changes:
            AuditService.log(request, 'update', 'promo_code', promo.id, promo.code, changes=changes)

        return Response({'promoCode': PromoCodeSerializer(promo).data})

    def delete(self, request, promo_id):
        promo = PromoCode.objects.filter(pk=promo_id).first()
        if promo is None:
            return not_found_response('Promo code not found')

        promo_id_str, code = str(promo.id), promo.code
        before = snapshot(promo, AUDITED_FIELDS)
        promo.delete()
        logger.info(f"Promo code {code} deleted")

        AuditService.log(
            request, 'delete', 'promo_code', promo_id_str, code,
            changes=diff_changes(before, {})
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
