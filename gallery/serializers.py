from rest_framework import serializers
from .models        import ImageCategory, PortfolioImage
from .images        import optimized_url, srcset

GRID_WIDTH     = 800
LIGHTBOX_WIDTH = 1920


class ImageCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model  = ImageCategory
        fields = ('id', 'name', 'description')


class PortfolioImageSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    alt_text      = serializers.CharField(read_only=True)
    display_url   = serializers.SerializerMethodField()
    full_url      = serializers.SerializerMethodField()
    srcset        = serializers.SerializerMethodField()

    class Meta:
        model  = PortfolioImage
        fields = (
            'id', 'image_url', 'thumbnail_url', 'display_url', 'full_url', 'srcset',
            'title', 'alt', 'alt_text', 'category', 'category_name',
            'is_featured', 'order',
        )

    def get_display_url(self, obj):
        return optimized_url(obj.display_url, width=GRID_WIDTH)

    def get_full_url(self, obj):
        return optimized_url(obj.image_url, width=LIGHTBOX_WIDTH, crop='limit')

    def get_srcset(self, obj):
        return srcset(obj.display_url)


class HeroImageSerializer(serializers.ModelSerializer):
    """Shape consumed by the hero carousel: id, url, alt."""
    url = serializers.SerializerMethodField()
    alt = serializers.CharField(source='alt_text', read_only=True)

    class Meta:
        model  = PortfolioImage
        fields = ('id', 'url', 'alt')

    def get_url(self, obj):
        return optimized_url(obj.image_url, width=LIGHTBOX_WIDTH, crop='limit')
