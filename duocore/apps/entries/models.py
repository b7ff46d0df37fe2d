from __future__ import annotations

import uuid

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from .services.field_map import AthleteData


class Entry(models.Model):
    """
    Inscripción de una dupla: dos atletas, metadatos de la dupla y el
    comprovante de pago. Se crea una sola vez (IntakePipeline) y después
    sólo cambia el status (ReviewWorkflow).
    """
    STATUS_PENDING = "pending_review"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"
    STATUS_DUPLICATE = "duplicate"

    STATUS_CHOICES = (
        (STATUS_PENDING, "Em análise"),
        (STATUS_ACCEPTED, "Aprovada"),
        (STATUS_REJECTED, "Recusada"),
        (STATUS_DUPLICATE, "Duplicada"),
    )
    TERMINAL_STATUSES = (STATUS_ACCEPTED, STATUS_REJECTED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    submitted_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    # Atleta 1
    athlete1_name = models.CharField(max_length=160, blank=True, default="")
    athlete1_phone = models.CharField(max_length=40, blank=True, default="")
    athlete1_email = models.CharField(max_length=254, blank=True, default="")
    athlete1_cep = models.CharField(max_length=16, blank=True, default="")
    athlete1_city = models.CharField(max_length=120, blank=True, default="")
    athlete1_kit = models.CharField(max_length=80, blank=True, default="")

    # Atleta 2
    athlete2_name = models.CharField(max_length=160, blank=True, default="")
    athlete2_phone = models.CharField(max_length=40, blank=True, default="")
    athlete2_email = models.CharField(max_length=254, blank=True, default="")
    athlete2_cep = models.CharField(max_length=16, blank=True, default="")
    athlete2_city = models.CharField(max_length=120, blank=True, default="")
    athlete2_kit = models.CharField(max_length=80, blank=True, default="")

    # Dupla
    duo_name = models.CharField(max_length=160, blank=True, default="")
    duo_category = models.CharField(max_length=120, db_index=True)
    duo_instagram = models.CharField(max_length=120, blank=True, default="")

    consent = models.BooleanField(default=False)
    # Formato viejo "<kit1> / <kit2>", anterior a los campos de kit por atleta
    uniforms = models.CharField(max_length=200, blank=True, default="")

    # Comprovante
    payment_proof = models.CharField(max_length=255, blank=True, default="")
    payment_proof_url = models.CharField(max_length=500, blank=True, default="")
    payment_proof_mime = models.CharField(max_length=100, blank=True, default="")
    # NULL sólo para filas importadas sin archivo; varios NULL no chocan con unique
    proof_fingerprint = models.CharField(max_length=64, unique=True, null=True, blank=True, editable=False)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)

    # Validación (ok y text_sample reservados; score es heurístico)
    validation_ok = models.BooleanField(null=True, blank=True)
    validation_score = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        help_text="Heurística de completitud 0..100 para priorizar la revisión. No valida el pago.",
    )
    validation_mime = models.CharField(max_length=100, blank=True, default="")
    validation_text_sample = models.TextField(blank=True, default="")

    class Meta:
        db_table = "entries"
        ordering = ("-submitted_at",)
        verbose_name = "inscrição"
        verbose_name_plural = "inscrições"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(validation_score__gte=0) & models.Q(validation_score__lte=100),
                name="entries_score_0_100",
            ),
            models.CheckConstraint(
                condition=~models.Q(duo_category=""),
                name="entries_category_not_empty",
            ),
        ]

    def __str__(self) -> str:
        label = self.duo_name or f"{self.athlete1_name} & {self.athlete2_name}"
        return f"{label} · {self.duo_category}"

    def clean(self):
        if not (self.duo_category or "").strip():
            raise ValidationError("A categoria da dupla é obrigatória.")
        if not 0 <= (self.validation_score or 0) <= 100:
            raise ValidationError("validation_score fora de 0..100")

    def athlete(self, n: int) -> AthleteData:
        if n not in (1, 2):
            raise ValueError("n debe ser 1 o 2")
        return AthleteData(
            name=getattr(self, f"athlete{n}_name"),
            phone=getattr(self, f"athlete{n}_phone"),
            email=getattr(self, f"athlete{n}_email"),
            cep=getattr(self, f"athlete{n}_cep"),
            city=getattr(self, f"athlete{n}_city"),
            kit=getattr(self, f"athlete{n}_kit"),
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in self.TERMINAL_STATUSES

    def contact_emails(self) -> list[str]:
        emails = []
        for e in (self.athlete1_email, self.athlete2_email):
            e = (e or "").strip()
            if e and e.lower() not in [x.lower() for x in emails]:
                emails.append(e)
        return emails
