# duocore/apps/entries/services/field_map.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

from django.conf import settings


@dataclass(frozen=True)
class AthleteData:
    name: str = ""
    phone: str = ""
    email: str = ""
    cep: str = ""
    city: str = ""
    kit: str = ""


@dataclass(frozen=True)
class DuoData:
    name: str = ""
    category: str = ""
    instagram: str = ""


@dataclass(frozen=True)
class Submission:
    athlete1: AthleteData = field(default_factory=AthleteData)
    athlete2: AthleteData = field(default_factory=AthleteData)
    duo: DuoData = field(default_factory=DuoData)
    consent: bool = False

    def athletes(self) -> tuple[AthleteData, AthleteData]:
        return self.athlete1, self.athlete2


# ---------------------------------------------------------------------
# Tabla de campos del formulario externo → campo semántico.
# Una revisión nueva del formulario agrega una versión (filas), no código.
# ---------------------------------------------------------------------
FORM_FIELD_MAPS: Dict[str, Dict[str, str]] = {
    "2024-duo": {
        "entry.857165334": "athlete1.name",
        "entry.222222222": "athlete1.phone",
        "entry.444444444": "athlete1.email",
        "entry.cep1": "athlete1.cep",
        "city1": "athlete1.city",
        "entry.kit1": "athlete1.kit",
        "entry.949098972": "athlete2.name",
        "entry.333333333": "athlete2.phone",
        "entry.555555555": "athlete2.email",
        "entry.cep2": "athlete2.cep",
        "city2": "athlete2.city",
        "entry.kit2": "athlete2.kit",
        "entry.111111111": "duo.name",
        "entry.666666666": "duo.category",
        "entry.622151674": "duo.instagram",
        "acceptTerms": "consent",
    },
}

TRUTHY = {"on", "true", "1", "sim", "s", "yes", "y"}


def _clean(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else ""
    return str(value).strip()


def parse_consent(value) -> bool:
    if isinstance(value, bool):
        return value
    return _clean(value).lower() in TRUTHY


def field_map(version: str | None = None) -> Dict[str, str]:
    version = version or getattr(settings, "DUO_FORM_VERSION", "2024-duo")
    try:
        return FORM_FIELD_MAPS[version]
    except KeyError:
        raise ValueError(f"Versión de formulario desconocida: {version!r}")


def map_form_fields(raw: Mapping, version: str | None = None) -> Submission:
    """
    Convierte los campos crudos del formulario (claves opacas tipo
    'entry.857165334') en un Submission. Claves ausentes quedan como "".
    Acepta un QueryDict o un dict simple.
    """
    buckets: Dict[str, Dict[str, str]] = {"athlete1": {}, "athlete2": {}, "duo": {}}
    consent = False

    for external_key, target in field_map(version).items():
        if external_key not in raw:
            continue
        # QueryDict.get devuelve el último valor, igual que un dict
        value = raw.get(external_key)
        if target == "consent":
            consent = parse_consent(value)
            continue
        group, attr = target.split(".", 1)
        buckets[group][attr] = _clean(value)

    return Submission(
        athlete1=AthleteData(**buckets["athlete1"]),
        athlete2=AthleteData(**buckets["athlete2"]),
        duo=DuoData(**buckets["duo"]),
        consent=consent,
    )


def submission_from_nested(record: Mapping) -> Submission:
    """
    Lee el formato del almacén JSON viejo:
    {"athlete1": {...}, "athlete2": {...}, "duo": {...}, "consent": "on"}
    """
    def _athlete(d) -> AthleteData:
        d = d or {}
        return AthleteData(**{k: _clean(d.get(k)) for k in AthleteData.__dataclass_fields__})

    duo = record.get("duo") or {}
    return Submission(
        athlete1=_athlete(record.get("athlete1")),
        athlete2=_athlete(record.get("athlete2")),
        duo=DuoData(**{k: _clean(duo.get(k)) for k in DuoData.__dataclass_fields__}),
        consent=parse_consent(record.get("consent")),
    )
