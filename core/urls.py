"""
URL configuration for the studio site backend.
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),

    # ── Auth (staff only use the inbox) ────────────
    path('api/auth/token/',         TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(),    name='token_refresh'),

    # ── Gallery ────────────────────────────────────
    path('api/gallery/', include('gallery.urls')),

    # ── Contact ────────────────────────────────────
    path('api/contact/', include('contact.urls')),
]
