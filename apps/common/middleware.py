"""
Error handling middleware for the API
"""

import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Turns uncaught exceptions on API paths into a generic JSON 500 response
    """

    def process_exception(self, request, exception):
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        if request.path.startswith('/api/'):
            error_response = {
                'code': 500,
                'msg': 'Internal server error',
            }
            return JsonResponse(error_response, status=500)

        return None  # Let Django handle non-API errors normally
