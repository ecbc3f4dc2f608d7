from django.contrib import admin
from .models import AdminAuditLog


@admin.register(AdminAuditLog)
class AdminAuditLogAdmin(admin.ModelAdmin):
    """Read-only view of the admin audit trail"""

    list_display = ['created_at', 'user', 'action', 'entity_type', 'entity_name', 'ip_address']
    list_filter = ['action', 'entity_type', 'created_at']
    search_fields = ['entity_id', 'entity_name', 'user__username']
    ordering = ['-created_at']
    readonly_fields = [
        'user', 'action', 'entity_type', 'entity_id', 'entity_name',
        'changes', 'ip_address', 'user_agent', 'created_at'
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
