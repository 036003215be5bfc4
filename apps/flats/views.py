from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.models import User
from apps.accounts.permissions import IsAdminRole
from apps.payments.services import InvalidPeriodError

from .models import Flat
from .permissions import CanAccessFlat
from .serializers import (
    FlatSerializer,
    FlatMinimalSerializer,
    FlatCreateSerializer,
    ConnectFlatsSerializer,
    PeriodQuerySerializer,
    FlatGroupSerializer,
    AllGroupsSerializer,
    ErrorSerializer,
)
from .services import (
    load_adjacency,
    get_flat,
    list_flats,
    list_available_flats,
    create_flat,
    clear_flat_owner,
    connect_flats,
    flat_group_summary,
    all_groups_summary,
    # Exceptions
    FlatNotFoundError,
    DuplicateFlatError,
    InvalidFlatNumberError,
    SelfConnectionError,
    NoActiveOwnerError,
)


PERIOD_PARAMETERS = [
    OpenApiParameter('month', OpenApiTypes.INT, description='Billing month (1-12), defaults to current'),
    OpenApiParameter('year', OpenApiTypes.INT, description='Billing year, defaults to current'),
]


def _active_residents():
    return {
        user.flat_id: user
        for user in User.objects.filter(is_active=True, flat__isnull=False)
    }


class FlatViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for flats and their groups.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Admins get every flat, residents only their own
    create: Create a flat and place it in a group (admin only)
    retrieve: Get a flat (admin or its resident)
    """

    queryset = Flat.objects.all()
    serializer_class = FlatSerializer
    permission_classes = [IsAuthenticated]
    lookup_field = 'flat_number'
    lookup_value_regex = '[^/]+'

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['create', 'connect', 'clear_owner', 'groups']:
            return [IsAuthenticated(), IsAdminRole()]
        if self.action in ['retrieve', 'group']:
            return [IsAuthenticated(), CanAccessFlat()]
        if self.action == 'available':
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        user = self.request.user
        if user.is_admin:
            return list_flats()
        return Flat.objects.filter(flat_number=user.flat_id)

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.action == 'list':
            context['adjacency'] = load_adjacency()
            context['residents'] = _active_residents()
        return context

    @extend_schema(
        request=FlatCreateSerializer,
        responses={201: FlatSerializer, 400: ErrorSerializer},
        description="Create a flat. Unless auto_place is false, it joins the first group with room.",
        tags=['flats'],
    )
    def create(self, request, *args, **kwargs):
        """Create a new flat."""
        serializer = FlatCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            flat = create_flat(
                flat_number=serializer.validated_data['flat_number'],
                auto_place=serializer.validated_data['auto_place'],
            )
        except (DuplicateFlatError, InvalidFlatNumberError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = FlatSerializer(flat, context=self.get_serializer_context())
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: FlatSerializer, 404: ErrorSerializer},
        tags=['flats'],
    )
    def retrieve(self, request, flat_number=None):
        """Get a flat with its resident."""
        try:
            flat = get_flat(flat_number=flat_number)
        except FlatNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(FlatSerializer(flat).data)

    @extend_schema(
        parameters=PERIOD_PARAMETERS,
        responses={200: FlatGroupSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        description="Get the flat's group and how many of its flats paid for the month.",
        tags=['flats'],
    )
    @action(detail=True, methods=['get'])
    def group(self, request, flat_number=None):
        """Get the group of a flat with payment stats."""
        query_serializer = PeriodQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        try:
            data = flat_group_summary(
                flat_number=flat_number,
                month=params.get('month'),
                year=params.get('year'),
            )
        except FlatNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidPeriodError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(data)

    @extend_schema(
        request=ConnectFlatsSerializer,
        responses={200: FlatSerializer, 400: ErrorSerializer},
        description="Link a flat to other existing flats in both directions (admin only).",
        tags=['flats'],
    )
    @action(detail=True, methods=['post'])
    def connect(self, request, flat_number=None):
        """Connect a flat to other flats."""
        serializer = ConnectFlatsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            flat = connect_flats(
                flat_number=flat_number,
                target_numbers=serializer.validated_data['target_flats'],
            )
        except FlatNotFoundError as e:
            if flat_number in e.flat_numbers:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            return Response(
                {'error': str(e), 'missing_flats': e.flat_numbers},
                status=status.HTTP_400_BAD_REQUEST
            )
        except SelfConnectionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(FlatSerializer(flat).data)

    @extend_schema(
        request=None,
        responses={200: None, 404: ErrorSerializer},
        description="Remove the active resident from a flat (admin only).",
        tags=['flats'],
    )
    @action(detail=True, methods=['put'], url_path='clear-owner')
    def clear_owner(self, request, flat_number=None):
        """Clear the resident of a flat."""
        try:
            clear_flat_owner(flat_number=flat_number)
        except (FlatNotFoundError, NoActiveOwnerError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'message': 'Owner cleared from flat'})

    @extend_schema(
        responses={200: FlatMinimalSerializer(many=True)},
        description="Flats without an active resident, for registration.",
        tags=['flats'],
    )
    @action(detail=False, methods=['get'])
    def available(self, request):
        """List unassigned flats."""
        return Response(FlatMinimalSerializer(list_available_flats(), many=True).data)

    @extend_schema(
        parameters=PERIOD_PARAMETERS,
        responses={200: AllGroupsSerializer, 400: ErrorSerializer},
        description="Every group of the building with payment stats for the month (admin only).",
        tags=['flats'],
    )
    @action(detail=False, methods=['get'])
    def groups(self, request):
        """List all groups with payment stats."""
        query_serializer = PeriodQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        try:
            data = all_groups_summary(month=params.get('month'), year=params.get('year'))
        except InvalidPeriodError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(data)
