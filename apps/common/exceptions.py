"""
DRF exception handler returning the {code, msg, errors} envelope.

Domain errors that escape a view are mapped to a 4xx status here, so a view
only needs to catch the errors it wants to word differently.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.payments.exceptions import PaymentNotPending, TransactionNotFound
from apps.pricing.exceptions import (
    MovieNotFound, MovieNotPurchasable, PromoCodeAlreadyRedeemed, PromoCodeExhausted
)
from apps.rentals.exceptions import ActiveRentalExists, MissingViewer

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS = {
    MovieNotFound: status.HTTP_404_NOT_FOUND,
    TransactionNotFound: status.HTTP_404_NOT_FOUND,
    MovieNotPurchasable: status.HTTP_400_BAD_REQUEST,
    MissingViewer: status.HTTP_400_BAD_REQUEST,
    ActiveRentalExists: status.HTTP_409_CONFLICT,
    PaymentNotPending: status.HTTP_409_CONFLICT,
    PromoCodeExhausted: status.HTTP_409_CONFLICT,
    PromoCodeAlreadyRedeemed: status.HTTP_409_CONFLICT,
}

STATUS_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Validation error',
    status.HTTP_401_UNAUTHORIZED: 'Authentication required',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Resource not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
}


def domain_error_status(exc):
    for error_class, status_code in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, error_class):
            return status_code
    return None


def custom_exception_handler(exc, context):
    """
    Wrap DRF and domain errors in the standard envelope.
    Anything else is left to ErrorHandlingMiddleware.
    """
    status_code = domain_error_status(exc)
    if status_code is not None:
        logger.info(f"{type(exc).__name__}: {exc}")
        return Response({'code': status_code, 'msg': str(exc)}, status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None

    logger.warning(f"API Exception: {exc}")

    if response.status_code >= 500:
        msg, errors = 'Internal server error', {'detail': 'Internal server error'}
    else:
        msg, errors = STATUS_MESSAGES.get(response.status_code, 'An error occurred'), response.data

    response.data = {
        'code': response.status_code,
        'msg': msg,
        'errors': errors,
    }
    return response
