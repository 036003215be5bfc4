# ==========================================
# apps/flats/admin.py
# ==========================================

from django.contrib import admin
from apps.flats.models import Flat, FlatLink


class FlatLinkInline(admin.TabularInline):
    """Inline admin for a flat's outgoing links."""
    model = FlatLink
    fk_name = 'from_flat'
    extra = 0
    fields = ['to_flat', 'created_at']
    readonly_fields = ['to_flat', 'created_at']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        # Links are written in pairs by the connect service
        return False


@admin.register(Flat)
class FlatAdmin(admin.ModelAdmin):
    """Admin interface for Flats."""

    list_display = [
        'flat_number',
        'connected_flat_list',
        'resident',
        'created_at'
    ]
    search_fields = ['flat_number', 'residents__username']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [FlatLinkInline]
    ordering = ['flat_number']

    fieldsets = (
        ('Basic Information', {
            'fields': ('flat_number',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        # Flat numbers are immutable once created
        if obj is not None:
            return self.readonly_fields + ['flat_number']
        return self.readonly_fields

    def connected_flat_list(self, obj):
        return ', '.join(obj.connected_flat_numbers())
    connected_flat_list.short_description = 'Connected flats'

    def resident(self, obj):
        resident = obj.get_active_resident()
        return resident.username if resident else '-'
    resident.short_description = 'Resident'


@admin.register(FlatLink)
class FlatLinkAdmin(admin.ModelAdmin):
    """Read-only view of flat links."""

    list_display = ['from_flat', 'to_flat', 'created_at']
    search_fields = ['from_flat__flat_number', 'to_flat__flat_number']
    readonly_fields = ['from_flat', 'to_flat', 'created_at']
    ordering = ['id']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        # A single row would leave a one-way link
        return False

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('from_flat', 'to_flat')
