from django.conf                 import settings
from django.shortcuts            import get_object_or_404
from rest_framework              import generics, status
from rest_framework.views        import APIView
from rest_framework.response     import Response
from rest_framework.permissions  import AllowAny

from .models       import ImageCategory, PortfolioImage
from .serializers  import (
    ImageCategorySerializer,
    PortfolioImageSerializer,
    HeroImageSerializer,
)
from .viewer       import ALL, GalleryViewer, ScrollLock, cell_span, wrap_previous, wrap_next
from .carousel     import HeroCarousel


def _category_param(request):
    """
    `?category=` as the viewer expects it: "all", a category pk, or the raw
    string (which simply matches nothing).
    """
    value = request.query_params.get('category', ALL) or ALL
    if value == ALL:
        return ALL
    try:
        return int(value)
    except ValueError:
        return value


def _viewer_for(request):
    images = PortfolioImage.objects.filter(is_visible=True).select_related('category')
    viewer = GalleryViewer(images, ImageCategory.objects.all(), scroll_lock=ScrollLock())
    viewer.set_category(_category_param(request))
    return viewer


# ─── Categories ───────────────────────────────────────────────────────────────

class CategoryListView(generics.ListAPIView):
    """GET /api/gallery/categories/  — Public"""
    queryset               = ImageCategory.objects.all()
    serializer_class       = ImageCategorySerializer
    permission_classes     = [AllowAny]
    authentication_classes = []
    pagination_class       = None


# ─── Portfolio grid ───────────────────────────────────────────────────────────

class PortfolioGridView(APIView):
    """
    GET /api/gallery/images/?category=<id|all>
    The filtered grid plus everything the frontend needs to lay it out:
    column counts per breakpoint and the span of every cell.
    """
    permission_classes     = [AllowAny]
    authentication_classes = []

    def get(self, request):
        viewer   = _viewer_for(request)
        filtered = viewer.filtered_images
        shown, total = viewer.counts

        results = []
        for index, image in enumerate(filtered):
            item = PortfolioImageSerializer(image).data
            item['span'] = cell_span(index, shown)._asdict()
            results.append(item)

        return Response({
            'category': viewer.selected_category,
            'label':    viewer.category_label(),
            'count':    shown,
            'total':    total,
            'layout':   viewer.layout._asdict(),
            'results':  results,
        })


# ─── Lightbox ─────────────────────────────────────────────────────────────────

class LightboxView(APIView):
    """
    GET /api/gallery/images/<pk>/lightbox/?category=<id|all>
    Opens one image inside the filtered view and returns its position and
    wrapping neighbours.  404 when the image is hidden or filtered out.
    """
    permission_classes     = [AllowAny]
    authentication_classes = []

    def get(self, request, pk):
        image = get_object_or_404(PortfolioImage, pk=pk, is_visible=True)

        with _viewer_for(request) as viewer:
            filtered = viewer.filtered_images
            if image not in filtered:
                return Response(
                    {'error': 'Image not found in this category.'},
                    status=status.HTTP_404_NOT_FOUND,
                )

            index = filtered.index(image)
            viewer.open_at(filtered[index], index)
            count = len(filtered)

            previous_id = next_id = None
            if count > 1:
                previous_id = filtered[wrap_previous(index, count)].pk
                next_id     = filtered[wrap_next(index, count)].pk

            return Response({
                'image':    PortfolioImageSerializer(viewer.open_image).data,
                'index':    viewer.open_index,
                'count':    count,
                'position': viewer.position_label,
                'previous': previous_id,
                'next':     next_id,
            })


# ─── Hero ─────────────────────────────────────────────────────────────────────

class HeroImagesView(APIView):
    """GET /api/gallery/hero/  — featured images for the auto-advancing hero."""
    permission_classes     = [AllowAny]
    authentication_classes = []

    def get(self, request):
        images = PortfolioImage.objects.filter(
            is_visible=True, is_featured=True,
        ).order_by('featured_order', 'order')

        carousel = HeroCarousel(images, interval=settings.HERO_INTERVAL_SECONDS)
        return Response({
            'interval': carousel.interval,
            'autoplay': carousel.autoplays,
            'images':   HeroImageSerializer(carousel.images, many=True).data,
        })
