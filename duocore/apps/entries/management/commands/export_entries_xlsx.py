from __future__ import annotations

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from duocore.apps.entries.exceptions import StorageUnavailable
from duocore.apps.entries.models import Entry
from duocore.apps.entries.services.export import build_workbook, export_filename, project_export
from duocore.apps.entries.services.repository import EntryRepository
from duocore.apps.entries.services.uniforms import aggregate_uniforms


class Command(BaseCommand):
    help = "Exporta inscrições filtradas (+ totais de uniformes) para um .xlsx de duas abas."

    def add_arguments(self, parser):
        parser.add_argument("--category", default=None, help="Filtra por categoria (ej. Elite)")
        parser.add_argument(
            "--status",
            default=None,
            choices=[s for s, _ in Entry.STATUS_CHOICES],
            help="Filtra por status",
        )
        parser.add_argument("--output", default=None, help="Ruta del .xlsx (por defecto: inscricoes_<timestamp>.xlsx)")

    def handle(self, *args, **options):
        try:
            entries = EntryRepository().list_filtered(
                category=options.get("category"), status=options.get("status")
            )
        except StorageUnavailable as e:
            raise CommandError(f"Base de datos no disponible: {e}")

        totals = aggregate_uniforms(entries)
        output = Path(options.get("output") or (Path.cwd() / export_filename()))
        if not output.parent.exists():
            raise CommandError(f"Directorio no encontrado: {output.parent}")

        build_workbook(project_export(entries, totals)).save(str(output))

        self.stdout.write(self.style.SUCCESS(f"Inscrições exportadas: {len(entries)}"))
        self.stdout.write(self.style.SUCCESS(f"Kits distintos: {len(totals)}"))
        self.stdout.write(self.style.SUCCESS(f"Arquivo: {output}"))
