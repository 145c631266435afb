"""URL configuration for the portfolio_site project."""

import os

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework import routers
from rest_framework_simplejwt.views import TokenRefreshView

from content import views as content_views
from content.auth import RememberMeTokenObtainPairView

router = routers.DefaultRouter()
router.register(r"custom-categories", content_views.CustomSkillCategoryViewSet)
router.register(r"project-categories", content_views.ProjectCategoryViewSet)

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health", lambda request: JsonResponse({"status": "ok"})),
    path(
        "api/info",
        lambda request: JsonResponse(
            {
                "app": "portfolio-site",
                "env": os.environ.get("DJANGO_ENV", "dev"),
                "debug": settings.DEBUG,
                "version": "1.0.0",
            }
        ),
    ),
    path("api/", include(router.urls)),
    path("api/portfolio", content_views.PortfolioView.as_view(), name="portfolio"),
    path("api/portfolio/<str:section>", content_views.SectionView.as_view(), name="portfolio-section"),
    path("api/status", content_views.StatusView.as_view(), name="status"),
    path("api/uploads/image", content_views.ImageUploadView.as_view(), name="image-upload"),
    path("api/contact", content_views.ContactView.as_view(), name="contact"),
    path("api/auth/jwt/create", RememberMeTokenObtainPairView.as_view(), name="jwt-create"),
    path("api/auth/jwt/refresh", TokenRefreshView.as_view(), name="jwt-refresh"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
