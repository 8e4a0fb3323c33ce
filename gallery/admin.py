from django.contrib import admin
from .models import ImageCategory, PortfolioImage


@admin.register(ImageCategory)
class ImageCategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'description', 'created_at')
    search_fields = ('name',)


@admin.register(PortfolioImage)
class PortfolioImageAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'category', 'order', 'is_featured', 'featured_order', 'is_visible')
    list_editable = ('order', 'is_featured', 'featured_order', 'is_visible')
    list_filter = ('category', 'is_featured', 'is_visible')
    search_fields = ('title', 'alt', 'image_url')
