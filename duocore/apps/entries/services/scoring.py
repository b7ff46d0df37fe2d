# duocore/apps/entries/services/scoring.py
"""
Score de completitud (0..100) de una inscripción.

Es sólo una señal para ordenar la revisión manual: mide qué tan completo
vino el formulario. No valida el comprovante ni el pago; un score 100 no
significa que la inscripción sea correcta.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional

from django.conf import settings

from .field_map import Submission

ACCEPTED_EXTENSIONS = frozenset({".pdf", ".jpg", ".jpeg", ".png", ".webp"})

SCORE_MIN = 0
SCORE_MAX = 100


@dataclass(frozen=True)
class ScoreWeights:
    base: int = 50
    accepted_extension: int = 10
    both_emails: int = 10
    both_kits: int = 10
    duo_name: int = 10
    duo_category: int = 10
    duo_instagram: int = 5
    missing_consent: int = -20


DEFAULT_WEIGHTS = ScoreWeights()


def configured_weights(overrides: Optional[Mapping[str, int]] = None) -> ScoreWeights:
    """Pesos por defecto + DUO_SCORE_WEIGHTS de settings (o los overrides dados)."""
    if overrides is None:
        overrides = getattr(settings, "DUO_SCORE_WEIGHTS", None) or {}
    unknown = set(overrides) - set(ScoreWeights.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Pesos desconocidos en DUO_SCORE_WEIGHTS: {sorted(unknown)}")
    return replace(DEFAULT_WEIGHTS, **overrides)


def _normalize_extension(extension: str | None) -> str:
    ext = (extension or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def completeness_score(
    submission: Submission,
    extension: str | None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    a1, a2 = submission.athletes()
    score = weights.base

    if _normalize_extension(extension) in ACCEPTED_EXTENSIONS:
        score += weights.accepted_extension
    if a1.email and a2.email:
        score += weights.both_emails
    if a1.kit and a2.kit:
        score += weights.both_kits
    if submission.duo.name:
        score += weights.duo_name
    if submission.duo.category:
        score += weights.duo_category
    if submission.duo.instagram:
        score += weights.duo_instagram
    # Bonos topean en 100 antes de la penalidad: completo sin consent = 80
    score = min(SCORE_MAX, score)
    if not submission.consent:
        score += weights.missing_consent

    return max(SCORE_MIN, min(SCORE_MAX, score))
