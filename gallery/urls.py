from django.urls import path
from .views import (
    CategoryListView,
    PortfolioGridView,
    LightboxView,
    HeroImagesView,
)

urlpatterns = [
    path('categories/',                  CategoryListView.as_view(),  name='gallery_categories'),
    path('images/',                      PortfolioGridView.as_view(), name='gallery_images'),
    path('images/<int:pk>/lightbox/',    LightboxView.as_view(),      name='gallery_lightbox'),
    path('hero/',                        HeroImagesView.as_view(),    name='gallery_hero'),
]
