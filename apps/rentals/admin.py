from django.contrib import admin
from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    list_display = ['id', 'movie', 'user', 'anonymous_id', 'amount', 'currency', 'purchased_at', 'expires_at']
    list_filter = ['payment_method', 'purchased_at']
    search_fields = ['id', 'transaction_id', 'user__username', 'anonymous_id']
    readonly_fields = ['id', 'created_at']
    raw_id_fields = ['movie', 'user']
    ordering = ['-purchased_at']
