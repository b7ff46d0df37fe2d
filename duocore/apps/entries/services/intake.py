# duocore/apps/entries/services/intake.py
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Iterable, Mapping, Optional

from django.conf import settings
from django.utils import timezone

from ..exceptions import (
    DuplicateProof,
    IncompleteSubmission,
    MissingProof,
    PayloadTooLarge,
    UnsupportedMediaType,
)
from ..models import Entry
from .field_map import Submission, map_form_fields
from .files import ProofFileSink, make_storage_name, proof_extension
from .hashing import fingerprint_file
from .kits import combine_kits
from .repository import EntryRepository
from .scoring import ScoreWeights, completeness_score, configured_weights

logger = logging.getLogger(__name__)


def declared_mime(upload) -> str:
    """content_type declarado por el cliente, sin parámetros ('; charset=...')."""
    ctype = getattr(upload, "content_type", None) or ""
    return ctype.split(";", 1)[0].strip().lower()


def entry_fields_from_submission(submission: Submission) -> Dict[str, Any]:
    """Submission → kwargs de Entry (atletas, dupla, consent y string viejo de uniformes)."""
    fields: Dict[str, Any] = {}
    for n, athlete in enumerate(submission.athletes(), start=1):
        for attr in ("name", "phone", "email", "cep", "city", "kit"):
            fields[f"athlete{n}_{attr}"] = getattr(athlete, attr)
    fields["duo_name"] = submission.duo.name
    fields["duo_category"] = submission.duo.category
    fields["duo_instagram"] = submission.duo.instagram
    fields["consent"] = submission.consent
    fields["uniforms"] = combine_kits(submission.athlete1.kit, submission.athlete2.kit)
    return fields


class IntakePipeline:
    """
    Recibe una inscripción (campos crudos + comprovante) y la persiste:

      1. exige archivo                      → MissingProof
      2. MIME permitido y tamaño máximo     → UnsupportedMediaType / PayloadTooLarge
         categoría obligatoria              → IncompleteSubmission
      3. guarda el archivo con nombre generado + extensión original
      4. fingerprint SHA-256 de los bytes guardados
      5. si el fingerprint ya existe        → DuplicateProof (el archivo queda en disco)
      6-8. mapea campos, arma `uniforms`, calcula score
      9. crea Entry en pending_review
     10. devuelve el id
    """

    def __init__(
        self,
        repository: Optional[EntryRepository] = None,
        sink: Optional[ProofFileSink] = None,
        *,
        max_bytes: Optional[int] = None,
        allowed_mime: Optional[Iterable[str]] = None,
        form_version: Optional[str] = None,
        weights: Optional[ScoreWeights] = None,
    ):
        self.repository = repository or EntryRepository()
        self.sink = sink or ProofFileSink()
        self.max_bytes = max_bytes or settings.DUO_PROOF_MAX_BYTES
        self.allowed_mime = frozenset(m.lower() for m in (allowed_mime or settings.DUO_ALLOWED_PROOF_MIME))
        self.form_version = form_version
        self.weights = weights or configured_weights()

    # ---------- gates de entrada ----------
    def _check_upload(self, upload) -> str:
        if upload is None:
            raise MissingProof()
        mime = declared_mime(upload)
        if mime not in self.allowed_mime:
            raise UnsupportedMediaType()
        if (upload.size or 0) > self.max_bytes:
            raise PayloadTooLarge()
        return mime

    def submit(self, raw_fields: Mapping, upload) -> uuid.UUID:
        mime = self._check_upload(upload)

        submission = map_form_fields(raw_fields, self.form_version)
        if not submission.duo.category:
            raise IncompleteSubmission()

        extension = proof_extension(upload.name)
        stored_name = self.sink.persist(upload, make_storage_name(upload.name))

        with self.sink.open(stored_name) as fp:
            fingerprint = fingerprint_file(fp)

        if self.repository.find_by_fingerprint(fingerprint) is not None:
            # El archivo nuevo queda en disco como evidencia; no se crea fila
            logger.warning(
                "Comprovante duplicado (fingerprint %s); archivo huérfano %s",
                fingerprint[:12], stored_name,
            )
            raise DuplicateProof()

        fields = entry_fields_from_submission(submission)
        score = completeness_score(submission, extension, self.weights)

        entry_id = self.repository.create_entry(
            submitted_at=timezone.now(),
            payment_proof=stored_name,
            payment_proof_url=self.sink.url(stored_name),
            payment_proof_mime=mime,
            proof_fingerprint=fingerprint,
            validation_score=score,
            validation_mime=mime,
            status=Entry.STATUS_PENDING,
            **fields,
        )
        logger.info(
            "Inscrição %s criada (categoria=%s, score=%s)", entry_id, submission.duo.category, score
        )
        return entry_id
