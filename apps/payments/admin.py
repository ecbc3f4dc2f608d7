from django.contrib import admin
from .models import PaymentTransaction


@admin.register(PaymentTransaction)
class PaymentTransactionAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'movie', 'user', 'anonymous_id', 'provider',
        'amount_lak', 'original_amount_lak', 'status', 'created_at', 'paid_at'
    ]
    list_filter = ['status', 'provider', 'created_at']
    search_fields = ['id', 'provider_transaction_id', 'user__username', 'anonymous_id']
    readonly_fields = ['id', 'created_at', 'updated_at', 'paid_at']
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'movie', 'rental', 'user', 'anonymous_id')
        }),
        ('Payment Details', {
            'fields': ('provider', 'amount_lak', 'original_amount_lak', 'promo_code', 'status', 'created_at', 'paid_at')
        }),
        ('Provider', {
            'fields': ('provider_transaction_id', 'provider_response'),
            'classes': ('collapse',)
        }),
    )
