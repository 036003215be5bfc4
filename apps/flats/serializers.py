"""
Serializers for flats app.

Input serializers validate request bodies and query parameters; response
serializers document the plain dicts returned by the group statistics
services.
"""

from rest_framework import serializers
from .models import Flat


class FlatSerializer(serializers.ModelSerializer):
    """
    Flat with its direct links and active resident.

    Pass an ``AdjacencyModel`` as ``context['adjacency']`` when serializing
    many flats to avoid one link query per flat.
    """

    connected_flats = serializers.SerializerMethodField()
    owner_name = serializers.SerializerMethodField()
    contact = serializers.SerializerMethodField()

    class Meta:
        model = Flat
        fields = [
            'flat_number',
            'connected_flats',
            'owner_name',
            'contact',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_connected_flats(self, obj):
        adjacency = self.context.get('adjacency')
        if adjacency is not None:
            return adjacency.neighbors(obj.flat_number)
        return obj.connected_flat_numbers()

    def _resident(self, obj):
        residents = self.context.get('residents')
        if residents is not None:
            return residents.get(obj.flat_number)
        return obj.get_active_resident()

    def get_owner_name(self, obj):
        resident = self._resident(obj)
        return resident.username if resident else None

    def get_contact(self, obj):
        resident = self._resident(obj)
        return resident.contact if resident else None


class FlatMinimalSerializer(serializers.ModelSerializer):
    """Flat number only, for the registration dropdown."""

    class Meta:
        model = Flat
        fields = ['flat_number']
        read_only_fields = fields


class FlatCreateSerializer(serializers.Serializer):
    """Serializer for creating a flat."""

    flat_number = serializers.CharField(max_length=20, required=True)
    auto_place = serializers.BooleanField(
        required=False,
        default=True,
        help_text='Join the new flat to the first group with room'
    )

    def validate_flat_number(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Flat number is required')
        return value


class ConnectFlatsSerializer(serializers.Serializer):
    """Serializer for linking a flat to other flats."""

    target_flats = serializers.ListField(
        child=serializers.CharField(max_length=20),
        allow_empty=False,
        help_text='Flat numbers to connect to'
    )


class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate billing period query parameters.

    Both are optional; the current month and year are used when omitted.
    """

    month = serializers.IntegerField(required=False, min_value=1, max_value=12)
    year = serializers.IntegerField(required=False, min_value=2000, max_value=2100)


# =============================================================================
# Response Serializers
# =============================================================================

class GroupStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    paid = serializers.IntegerField()
    due = serializers.IntegerField()


class FlatGroupSerializer(serializers.Serializer):
    flat_number = serializers.CharField()
    month = serializers.IntegerField()
    year = serializers.IntegerField()
    group = serializers.ListField(child=serializers.CharField())
    connected_flats = serializers.ListField(child=serializers.CharField())
    stats = GroupStatsSerializer()


class GroupSummarySerializer(serializers.Serializer):
    index = serializers.IntegerField()
    flats = serializers.ListField(child=serializers.CharField())
    paid_flats = serializers.ListField(child=serializers.CharField())
    stats = GroupStatsSerializer()


class AllGroupsSerializer(serializers.Serializer):
    month = serializers.IntegerField()
    year = serializers.IntegerField()
    group_count = serializers.IntegerField()
    groups = GroupSummarySerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    missing_flats = serializers.ListField(child=serializers.CharField(), required=False)
