"""
Admin pricing tier views.
"""
import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.audit import AuditService, diff_changes, snapshot
from apps.common.utils import conflict_response, error_response, first_error_message, not_found_response
from apps.movies.models import Movie
from ..models import PricingTier
from ..serializers import (
    PricingTierSerializer, PricingTierCreateSerializer, PricingTierUpdateSerializer
)

logger = logging.getLogger(__name__)

AUDITED_FIELDS = ['name', 'display_name_en', 'display_name_lo', 'price_lak', 'is_active', 'sort_order']


class AdminPricingTierListView(APIView):
    """List and create pricing tiers - /api/admin/pricing/tiers"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        tiers = PricingTier.objects.order_by('sort_order', 'price_lak')
        return Response({'tiers': PricingTierSerializer(tiers, many=True).data})

    def post(self, request):
        serializer = PricingTierCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        data = serializer.validated_data
        if PricingTier.objects.filter(name=data['name']).exists():
            return conflict_response('A pricing tier with this name already exists')

        tier = PricingTier.objects.create(**data)
        logger.info(f"Pricing tier {tier.name} created at {tier.price_lak} LAK")

        AuditService.log(
            request, 'create', 'pricing_tier', tier.id, tier.name,
            changes=diff_changes({}, snapshot(tier, AUDITED_FIELDS))
        )
        return Response({'tier': PricingTierSerializer(tier).data}, status=status.HTTP_201_CREATED)


class AdminPricingTierDetailView(APIView):
    """Update and delete a pricing tier - /api/admin/pricing/tiers/<id>"""
    permission_classes = [IsAdminUser]

    def patch(self, request, tier_id):
        tier = PricingTier.objects.filter(pk=tier_id).first()
        if tier is None:
            return not_found_response('Pricing tier not found')

        serializer = PricingTierUpdateSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        updates = serializer.validated_data
        new_name = updates.get('name')
        if new_name and new_name != tier.name and PricingTier.objects.filter(name=new_name).exists():
            return conflict_response('A pricing tier with this name already exists')

        before = snapshot(tier, AUDITED_FIELDS)
        for field, value in updates.items():
            setattr(tier, field, value)
        tier.save()

        changes = diff_changes(before, snapshot(tier, AUDITED_FIELDS))
        if changes:
            AuditService.log(request, 'update', 'pricing_tier', tier.id, tier.name, changes=changes)

        return Response({'tier': PricingTierSerializer(tier).data})

    def delete(self, request, tier_id):
        tier = PricingTier.objects.filter(pk=tier_id).first()
        if tier is None:
            return not_found_response('Pricing tier not found')

        if Movie.objects.filter(pricing_tier=tier).exists():
            return error_response(
                'Cannot delete tier that is assigned to movies. '
                'Reassign or remove pricing from movies first.'
            )

        tier_id_str, tier_name = str(tier.id), tier.name
        before = snapshot(tier, AUDITED_FIELDS)
        tier.delete()
        logger.info(f"Pricing tier {tier_name} deleted")

        AuditService.log(
            request, 'delete', 'pricing_tier', tier_id_str, tier_name,
            changes=diff_changes(before, {})
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
