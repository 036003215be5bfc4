from rest_framework import viewsets, status, mixins
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from apps.flats.serializers import PeriodQuerySerializer
from apps.flats.services import collection_summary as building_collection_summary

from .models import Payment
from .permissions import CanAccessFlatPayments
from .serializers import (
    PaymentSerializer,
    PaymentCreateSerializer,
    PaymentFilterSerializer,
    CollectionSummarySerializer,
)
from .services import (
    create_payment,
    list_payments,
    get_flat_payments,
    delete_payment,
    # Exceptions
    FlatNotFoundError,
    DuplicatePaymentError,
    PaymentNotFoundError,
    InsufficientPermissionsError,
    InvalidPeriodError,
)


class PaymentViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for maintenance payments.

    list: Admins get every payment (filterable), residents their flat's
    create: Record a payment (residents only for their own flat)
    destroy: Delete a payment (admin only)
    """

    queryset = Payment.objects.all()
    serializer_class = PaymentSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action == 'destroy':
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

    def get_queryset(self):
        """Filter payments using input serializer validation."""
        filter_serializer = PaymentFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_payments(
            user=self.request.user,
            flat_number=params.get('flat_number'),
            month=params.get('month'),
            year=params.get('year'),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter('flat_number', OpenApiTypes.STR, description='Filter by flat (admin only)'),
            OpenApiParameter('month', OpenApiTypes.INT, description='Billing month (1-12)'),
            OpenApiParameter('year', OpenApiTypes.INT, description='Billing year'),
        ],
        tags=['payments'],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=PaymentCreateSerializer,
        responses={201: PaymentSerializer},
        description="Record a maintenance payment for a flat and month.",
        tags=['payments'],
    )
    def create(self, request, *args, **kwargs):
        """Record a payment."""
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment = create_payment(user=request.user, **serializer.validated_data)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (FlatNotFoundError, DuplicatePaymentError, InvalidPeriodError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={204: None},
        description="Delete a payment (admin only).",
        tags=['payments'],
    )
    def destroy(self, request, pk=None):
        """Delete a payment."""
        try:
            delete_payment(payment_id=pk)
        except PaymentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: PaymentSerializer(many=True)},
    description="Payments of one flat, latest billing month first.",
    tags=['payments'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanAccessFlatPayments])
def flat_payments(request, flat_number):
    """Get payments by flat number - thin HTTP handler."""
    try:
        payments = get_flat_payments(flat_number=flat_number)
    except FlatNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(PaymentSerializer(payments, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('month', OpenApiTypes.INT, description='Billing month (1-12), defaults to current'),
        OpenApiParameter('year', OpenApiTypes.INT, description='Billing year, defaults to current'),
    ],
    responses={200: CollectionSummarySerializer},
    description="Building-wide paid/due counts and amount collected for a month (admin only).",
    tags=['payments'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def collection_summary(request):
    """Get collection summary - thin HTTP handler."""
    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    data = building_collection_summary(month=params.get('month'), year=params.get('year'))
    return Response(CollectionSummarySerializer(data).data)
