from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from duocore.apps.entries.exceptions import DuplicateProof
from duocore.apps.entries.models import Entry
from duocore.apps.entries.services.field_map import submission_from_nested
from duocore.apps.entries.services.files import ProofFileSink, proof_extension
from duocore.apps.entries.services.hashing import fingerprint_path
from duocore.apps.entries.services.intake import entry_fields_from_submission
from duocore.apps.entries.services.repository import EntryRepository
from duocore.apps.entries.services.scoring import completeness_score, configured_weights


def _parse_submitted_at(value) -> Optional[datetime]:
    if not value:
        return None
    dt = parse_datetime(str(value).replace("Z", "+00:00"))
    if dt is None:
        return None
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt, timezone.get_default_timezone())
    return dt


class Command(BaseCommand):
    help = (
        "Importa inscrições do arquivo JSON antigo ({\"entries\": [...]}, atletas aninhados). "
        "Calcula score e fingerprint do comprovante quando o arquivo existe."
    )

    def add_arguments(self, parser):
        parser.add_argument("json_path", type=str, help="Ruta al db.json del almacén viejo")
        parser.add_argument("--uploads-dir", dest="uploads_dir", default=None,
                            help="Directorio con los comprovantes viejos (para fingerprint)")
        parser.add_argument("--dry-run", action="store_true", help="Simula sin escribir cambios")

    def handle(self, *args, **options):
        json_path = Path(options["json_path"])
        uploads_dir = Path(options["uploads_dir"]) if options.get("uploads_dir") else None
        dry_run = options.get("dry_run", False)

        if not json_path.exists():
            raise CommandError(f"Archivo no encontrado: {json_path}")
        if uploads_dir is not None and not uploads_dir.is_dir():
            raise CommandError(f"Directorio no encontrado: {uploads_dir}")

        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise CommandError(f"JSON inválido: {e}")

        records = data.get("entries") if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise CommandError("Se esperaba una lista 'entries'.")

        repo = EntryRepository()
        sink = ProofFileSink()
        weights = configured_weights()
        total = ok = skipped = 0

        for idx, record in enumerate(records, start=1):
            total += 1
            if not isinstance(record, dict):
                skipped += 1
                self.stdout.write(self.style.WARNING(f"#{idx}: registro inválido ({type(record).__name__}), ignorado"))
                continue
            submission = submission_from_nested(record)
            if not submission.duo.category:
                skipped += 1
                self.stdout.write(self.style.WARNING(f"#{idx}: sem categoria, ignorada"))
                continue

            proof = str(record.get("paymentProof") or "")
            fingerprint = None
            if proof and uploads_dir is not None and (uploads_dir / proof).is_file():
                fingerprint = fingerprint_path(uploads_dir / proof)
                if repo.find_by_fingerprint(fingerprint) is not None:
                    skipped += 1
                    self.stdout.write(self.style.WARNING(f"#{idx}: comprovante já importado, ignorada"))
                    continue

            fields = entry_fields_from_submission(submission)
            # Filas viejas: si ya traían el string combinado, se conserva
            if record.get("uniforms") and not (submission.athlete1.kit or submission.athlete2.kit):
                fields["uniforms"] = str(record["uniforms"]).strip()

            if dry_run:
                ok += 1
                continue

            try:
                repo.create_entry(
                    submitted_at=_parse_submitted_at(record.get("submittedAt")) or timezone.now(),
                    payment_proof=proof,
                    payment_proof_url=sink.url(proof) if proof else "",
                    proof_fingerprint=fingerprint,
                    validation_score=completeness_score(submission, proof_extension(proof), weights),
                    status=Entry.STATUS_PENDING,
                    **fields,
                )
            except DuplicateProof:
                skipped += 1
                self.stdout.write(self.style.WARNING(f"#{idx}: comprovante duplicado, ignorada"))
                continue
            ok += 1

        self.stdout.write(self.style.SUCCESS(f"Registros procesados: {total}"))
        self.stdout.write(self.style.SUCCESS(f"OK: {ok}  ·  IGNORADOS: {skipped}"))
        if dry_run:
            self.stdout.write(self.style.WARNING("Dry-run: no se crearon inscripciones."))
