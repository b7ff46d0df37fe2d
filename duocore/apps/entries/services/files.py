from __future__ import annotations

import os
import secrets
from typing import IO

from django.conf import settings
from django.core.files.storage import FileSystemStorage


def proof_extension(filename: str | None) -> str:
    """Extensión original en minúsculas, con punto ('.pdf') o ''."""
    return os.path.splitext(os.path.basename(filename or ""))[1].lower()


def make_storage_name(original_name: str | None) -> str:
    # Nombre no adivinable, pero servible con la extensión correcta
    return secrets.token_hex(16) + proof_extension(original_name)


class ProofFileSink:
    """
    Guarda comprovantes en disco bajo MEDIA_ROOT/<DUO_PROOF_UPLOAD_DIR>/ y
    los expone en MEDIA_URL/<DUO_PROOF_UPLOAD_DIR>/<nombre>.
    """

    def __init__(self, storage: FileSystemStorage | None = None):
        if storage is None:
            subdir = getattr(settings, "DUO_PROOF_UPLOAD_DIR", "comprovantes")
            storage = FileSystemStorage(
                location=os.path.join(str(settings.MEDIA_ROOT), subdir),
                base_url=f"{settings.MEDIA_URL.rstrip('/')}/{subdir}/",
            )
        self.storage = storage

    def persist(self, upload, final_name: str) -> str:
        return self.storage.save(final_name, upload)

    def open(self, name: str) -> IO[bytes]:
        return self.storage.open(name, "rb")

    def url(self, name: str) -> str:
        return self.storage.url(name)
