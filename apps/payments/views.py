"""
Admin confirmation of manual payments.
"""
import logging

from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.audit import AuditService
from apps.common.utils import conflict_response, error_response, first_error_message, not_found_response
from apps.pricing.exceptions import PromoCodeExhausted
from apps.rentals.exceptions import ActiveRentalExists
from apps.rentals.serializers import RentalSerializer
from apps.rentals.services import RentalService
from .exceptions import PaymentNotPending, TransactionNotFound
from .serializers import PaymentTransactionSerializer, PaymentRejectSerializer

logger = logging.getLogger(__name__)


class AdminPaymentConfirmView(APIView):
    """Confirm a pending payment - /api/admin/payments/<transaction_id>/confirm"""
    permission_classes = [IsAdminUser]

    def post(self, request, transaction_id):
        try:
            rental, payment = RentalService.complete_payment(transaction_id)
        except TransactionNotFound:
            return not_found_response('Transaction not found')
        except PaymentNotPending as e:
            return conflict_response(str(e))
        except ActiveRentalExists as e:
            return conflict_response(str(e))
        except PromoCodeExhausted:
            return conflict_response('usage limit reached')

        AuditService.log(
            request, 'update', 'payment', payment.id, str(payment.movie_id),
            changes={'status': {'before': 'pending', 'after': payment.status}}
        )
        return Response({
            'rental': RentalSerializer(rental).data,
            'transaction': PaymentTransactionSerializer(payment).data,
        })


class AdminPaymentRejectView(APIView):
    """Reject a pending payment - /api/admin/payments/<transaction_id>/reject"""
    permission_classes = [IsAdminUser]

    def post(self, request, transaction_id):
        serializer = PaymentRejectSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(first_error_message(serializer.errors), errors=serializer.errors)

        try:
            payment = RentalService.reject_payment(transaction_id, serializer.validated_data.get('reason'))
        except TransactionNotFound:
            return not_found_response('Transaction not found')
        except PaymentNotPending as e:
            return conflict_response(str(e))

        AuditService.log(
            request, 'update', 'payment', payment.id, str(payment.movie_id),
            changes={'status': {'before': 'pending', 'after': payment.status}}
        )
        return Response({'transaction': PaymentTransactionSerializer(payment).data})
