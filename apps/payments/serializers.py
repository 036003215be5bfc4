from decimal import Decimal

from rest_framework import serializers
from .models import Payment, PaymentMode


# =============================================================================
# Input Serializers
# =============================================================================

class PaymentFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for payment filtering.

    Query Parameters:
        flat_number (str): Filter by flat (admins only)
        month (int): Billing month 1-12
        year (int): Billing year
    """

    flat_number = serializers.CharField(required=False, max_length=20)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)
    year = serializers.IntegerField(required=False, min_value=2000, max_value=2100)


class PaymentCreateSerializer(serializers.Serializer):
    """Serializer for recording a payment."""

    flat_number = serializers.CharField(max_length=20)
    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    paid_on = serializers.DateField()
    payment_mode = serializers.ChoiceField(
        choices=PaymentMode.choices,
        default=PaymentMode.UPI
    )
    note = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_flat_number(self, value):
        return value.strip()


# =============================================================================
# Output Serializers
# =============================================================================

class PaymentSerializer(serializers.ModelSerializer):
    """Payment with its flat number and readable period."""

    flat_number = serializers.CharField(source='flat_id', read_only=True)
    period = serializers.CharField(source='period_label', read_only=True)
    recorded_by = serializers.SerializerMethodField()

    class Meta:
        model = Payment
        fields = [
            'id',
            'flat_number',
            'month',
            'year',
            'period',
            'amount',
            'paid_on',
            'payment_mode',
            'note',
            'recorded_by',
            'created_at',
        ]
        read_only_fields = fields

    def get_recorded_by(self, obj):
        return obj.recorded_by.username if obj.recorded_by else None


class CollectionSummarySerializer(serializers.Serializer):
    month = serializers.IntegerField()
    year = serializers.IntegerField()
    total = serializers.IntegerField()
    paid = serializers.IntegerField()
    due = serializers.IntegerField()
    collected_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
