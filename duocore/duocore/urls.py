from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from duocore.apps.entries import views as entry_views

urlpatterns = [
    path("admin/", admin.site.urls),

    # API healthcheck
    path("api/health/", entry_views.health, name="api_health"),

    # Formulario público, envío y agradecimiento + panel de staff
    path("", include("duocore.apps.entries.urls")),
]

# Comprovantes servidos por Django sólo en desarrollo
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
