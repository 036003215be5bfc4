# ==========================================
# apps/payments/admin.py
# ==========================================

from django.contrib import admin
from apps.payments.models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin interface for maintenance payments."""

    list_display = [
        'flat',
        'period_label',
        'amount',
        'payment_mode',
        'paid_on',
        'recorded_by',
    ]
    list_filter = ['year', 'month', 'payment_mode']
    search_fields = ['flat__flat_number', 'note', 'recorded_by__username']
    readonly_fields = ['created_at']
    date_hierarchy = 'paid_on'
    ordering = ['-year', '-month', 'flat']

    fieldsets = (
        ('Payment', {
            'fields': ('flat', 'month', 'year', 'amount', 'paid_on', 'payment_mode')
        }),
        ('Details', {
            'fields': ('note', 'recorded_by', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    def period_label(self, obj):
        return obj.period_label
    period_label.short_description = 'Period'

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('flat', 'recorded_by')
