"""
Admin assignment of pricing tiers to movies.
"""
import logging

from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.audit import AuditService
from apps.common.utils import error_response, first_error_message, not_found_response
from apps.movies.models import Movie
from ..models import PricingTier
from ..serializers import MovieTierAssignmentSerializer, PricingResultSerializer
from ..services import PricingResolver

logger = logging.getLogger(__name__)


class AdminMoviePricingView(APIView):
    """Set or clear a movie's tier - /api/admin/movies/<movie_id>/pricing"""
    permission_classes = [IsAdminUser]

    def patch(self, request, movie_id):
        movie = Movie.objects.select_related('pricing_tier').filter(pk=movie_id).first()
        if movie is None:
            return not_found_response('Movie not found')

        serializer = MovieTierAssignmentSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        tier_id = serializer.validated_data['pricing_tier_id']
        tier = None
        if tier_id is not None:
            tier = PricingTier.objects.filter(pk=tier_id).first()
            if tier is None:
                return not_found_response('Pricing tier not found')

        previous = movie.pricing_tier
        movie.pricing_tier = tier
        movie.save(update_fields=['pricing_tier', 'updated_at'])
        logger.info(f"Movie {movie.id} pricing tier set to {tier.name if tier else None}")

        AuditService.log(
            request, 'update', 'movie', movie.id, movie.display_title,
            changes={
                'pricing_tier': {
                    'before': previous.name if previous else None,
                    'after': tier.name if tier else None,
                }
            }
        )

        pricing = PricingResolver.resolve_for_movie(movie)
        return Response({'pricing': PricingResultSerializer(pricing).data})
