import uuid

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Entry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("submitted_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ("athlete1_name", models.CharField(blank=True, default="", max_length=160)),
                ("athlete1_phone", models.CharField(blank=True, default="", max_length=40)),
                ("athlete1_email", models.CharField(blank=True, default="", max_length=254)),
                ("athlete1_cep", models.CharField(blank=True, default="", max_length=16)),
                ("athlete1_city", models.CharField(blank=True, default="", max_length=120)),
                ("athlete1_kit", models.CharField(blank=True, default="", max_length=80)),
                ("athlete2_name", models.CharField(blank=True, default="", max_length=160)),
                ("athlete2_phone", models.CharField(blank=True, default="", max_length=40)),
                ("athlete2_email", models.CharField(blank=True, default="", max_length=254)),
                ("athlete2_cep", models.CharField(blank=True, default="", max_length=16)),
                ("athlete2_city", models.CharField(blank=True, default="", max_length=120)),
                ("athlete2_kit", models.CharField(blank=True, default="", max_length=80)),
                ("duo_name", models.CharField(blank=True, default="", max_length=160)),
                ("duo_category", models.CharField(db_index=True, max_length=120)),
                ("duo_instagram", models.CharField(blank=True, default="", max_length=120)),
                ("consent", models.BooleanField(default=False)),
                ("uniforms", models.CharField(blank=True, default="", max_length=200)),
                ("payment_proof", models.CharField(blank=True, default="", max_length=255)),
                ("payment_proof_url", models.CharField(blank=True, default="", max_length=500)),
                ("payment_proof_mime", models.CharField(blank=True, default="", max_length=100)),
                ("proof_fingerprint", models.CharField(blank=True, editable=False, max_length=64, null=True, unique=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending_review", "Em análise"),
                            ("accepted", "Aprovada"),
                            ("rejected", "Recusada"),
                            ("duplicate", "Duplicada"),
                        ],
                        db_index=True,
                        default="pending_review",
                        max_length=20,
                    ),
                ),
                ("validation_ok", models.BooleanField(blank=True, null=True)),
                (
                    "validation_score",
                    models.PositiveSmallIntegerField(
                        default=0,
                        help_text="Heurística de completitud 0..100 para priorizar la revisión. No valida el pago.",
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                ("validation_mime", models.CharField(blank=True, default="", max_length=100)),
                ("validation_text_sample", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name": "inscrição",
                "verbose_name_plural": "inscrições",
                "db_table": "entries",
                "ordering": ("-submitted_at",),
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("validation_score__gte", 0), ("validation_score__lte", 100)),
                        name="entries_score_0_100",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("duo_category", ""), _negated=True),
                        name="entries_category_not_empty",
                    ),
                ],
            },
        ),
    ]
