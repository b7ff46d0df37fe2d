from __future__ import annotations

import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings

from duocore.apps.entries.models import Entry


def form_payload(**overrides) -> dict:
    """Campos crudos tal como llegan del formulario externo."""
    data = {
        "entry.857165334": "Ana Souza",
        "entry.222222222": "(11) 99999-0000",
        "entry.444444444": "ana@example.com",
        "entry.cep1": "01001-000",
        "city1": "São Paulo",
        "entry.kit1": "m feminino",
        "entry.949098972": "Bia Lima",
        "entry.333333333": "(11) 98888-0000",
        "entry.555555555": "bia@example.com",
        "entry.cep2": "20040-000",
        "city2": "Rio de Janeiro",
        "entry.kit2": "p feminino",
        "entry.111111111": "As Rápidas",
        "entry.666666666": "Elite",
        "entry.622151674": "@asrapidas",
        "acceptTerms": "on",
    }
    data.update(overrides)
    return {k: v for k, v in data.items() if v is not None}


def proof_file(content: bytes = b"%PDF-1.4 comprovante", name: str = "comprovante.PDF",
               content_type: str = "application/pdf") -> SimpleUploadedFile:
    return SimpleUploadedFile(name, content, content_type=content_type)


def make_entry(**fields) -> Entry:
    data = {
        "athlete1_name": "Ana",
        "athlete2_name": "Bia",
        "duo_category": "Elite",
        "validation_score": 50,
    }
    data.update(fields)
    return Entry.objects.create(**data)


class TempMediaMixin:
    """MEDIA_ROOT en un directorio temporal por test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp(prefix="duocore-test-")
        override = override_settings(MEDIA_ROOT=self.media_root)
        override.enable()
        self.addCleanup(override.disable)
        self.addCleanup(shutil.rmtree, self.media_root, True)
