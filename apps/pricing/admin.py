from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html
from .models import PricingTier, PromoCode, PromoCodeUse


@admin.register(PricingTier)
class PricingTierAdmin(admin.ModelAdmin):
    """Admin interface for pricing tiers"""

    list_display = [
        'display_name_en', 'name', 'price_lak', 'is_active', 'sort_order', 'movie_count', 'updated_at'
    ]
    list_filter = ['is_active']
    search_fields = ['name', 'display_name_en', 'display_name_lo']
    ordering = ['sort_order', 'price_lak']
    readonly_fields = ['id', 'created_at', 'updated_at', 'movie_count']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'display_name_en', 'display_name_lo')
        }),
        ('Price', {
            'fields': ('price_lak', 'is_active', 'sort_order')
        }),
        ('Statistics', {
            'fields': ('movie_count',),
            'classes': ('collapse',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def movie_count(self, obj):
        """Count of movies priced at this tier"""
        count = obj.movies.count()
        if count > 0:
            url = reverse('admin:movies_movie_changelist')
            return format_html(
                '<a href="{}?pricing_tier__id__exact={}">{} movies</a>',
                url, obj.id, count
            )
        return '0 movies'
    movie_count.short_description = 'Movies'

    def has_delete_permission(self, request, obj=None):
        # Tiers still assigned to movies are protected
        if obj and obj.movies.exists():
            return False
        return super().has_delete_permission(request, obj)


class PromoCodeUseInline(admin.TabularInline):
    model = PromoCodeUse
    extra = 0
    readonly_fields = ['rental', 'user', 'anonymous_id', 'used_at']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(PromoCode)
class PromoCodeAdmin(admin.ModelAdmin):
    """Admin interface for promo codes"""

    list_display = [
        'code', 'discount_type', 'discount_value', 'uses_count', 'max_uses',
        'valid_from', 'valid_to', 'movie', 'is_active'
    ]
    list_filter = ['discount_type', 'is_active', 'created_at']
    search_fields = ['code']
    readonly_fields = ['id', 'uses_count', 'created_at']
    raw_id_fields = ['movie']
    inlines = [PromoCodeUseInline]
