# duocore/apps/entries/services/uniforms.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .kits import normalize_kit_label


# ------------------------------
# Formatos históricos de uniforme
# ------------------------------
@dataclass(frozen=True)
class StructuredKits:
    """Kit por atleta (filas con athlete1_kit / athlete2_kit o JSON anidado)."""
    athlete1_kit: str = ""
    athlete2_kit: str = ""


@dataclass(frozen=True)
class LegacyCombinedString:
    """String viejo "M / G" sin campos por atleta."""
    raw: str = ""


UniformSource = Union[StructuredKits, LegacyCombinedString]


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def uniform_source(record: Any) -> Optional[UniformSource]:
    """
    Detecta el formato de uniforme de una inscripción:
      - modelo Entry o dict plano con athlete1_kit / athlete2_kit
      - dict anidado del almacén JSON: {"athlete1": {"kit": ...}, ...}
      - sólo el string combinado `uniforms`
    Los kits por atleta tienen prioridad; el string viejo sólo se usa si no hay ninguno.
    """
    kit1 = _text(_get(record, "athlete1_kit"))
    kit2 = _text(_get(record, "athlete2_kit"))

    if not (kit1 or kit2):
        nested1 = _get(record, "athlete1")
        nested2 = _get(record, "athlete2")
        if isinstance(nested1, Mapping) or isinstance(nested2, Mapping):
            kit1 = _text((nested1 or {}).get("kit"))
            kit2 = _text((nested2 or {}).get("kit"))

    if kit1 or kit2:
        return StructuredKits(kit1, kit2)

    legacy = _text(_get(record, "uniforms"))
    if legacy:
        return LegacyCombinedString(legacy)
    return None


# ------------------------------
# Lectores por variante
# ------------------------------
def _read_structured(src: StructuredKits) -> Iterator[str]:
    yield src.athlete1_kit
    yield src.athlete2_kit


def _read_legacy(src: LegacyCombinedString) -> Iterator[str]:
    for part in src.raw.split("/"):
        yield part.strip()


_READERS = {
    StructuredKits: _read_structured,
    LegacyCombinedString: _read_legacy,
}


def raw_labels(src: UniformSource) -> Iterator[str]:
    return _READERS[type(src)](src)


# ------------------------------
# Agregación
# ------------------------------
def aggregate_uniforms(entries: Iterable[Any]) -> Dict[str, int]:
    """
    Cuenta uniformes por etiqueta canónica sobre inscripciones ya filtradas.
    Etiquetas crudas distintas que normalizan igual se cuentan juntas.
    """
    totals: Counter = Counter()
    for record in entries:
        src = uniform_source(record)
        if src is None:
            continue
        for raw in raw_labels(src):
            label = normalize_kit_label(raw)
            if label:
                totals[label] += 1
    return dict(totals)


def sorted_totals(totals: Mapping[str, int]) -> List[Tuple[str, int]]:
    return sorted(totals.items(), key=lambda kv: kv[0])
