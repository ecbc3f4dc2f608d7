from django.contrib import admin
from .models import Movie, MovieTranslation


class MovieTranslationInline(admin.TabularInline):
    model = MovieTranslation
    extra = 0


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    """Admin interface for movies"""

    list_display = ['original_title', 'original_language', 'release_date', 'pricing_tier', 'created_at']
    list_filter = ['original_language', 'pricing_tier']
    search_fields = ['original_title', 'translations__title']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [MovieTranslationInline]
