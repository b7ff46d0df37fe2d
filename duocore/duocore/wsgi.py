import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "duocore.duocore.settings")

application = get_wsgi_application()

# Sin base de datos no aceptamos tráfico: falla el arranque del worker
from duocore.apps.entries.services.repository import ensure_storage_available  # noqa: E402

ensure_storage_available()
