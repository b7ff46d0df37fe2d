from __future__ import annotations

import re

SIZE_TOKENS = ("PP", "P", "M", "G", "GG", "GGG", "XG", "XXG")
GENDER_TOKENS = ("masculino", "feminino", "unissex", "adulto", "infantil")

_WS_RE = re.compile(r"\s+")
_KIT_PREFIX_RE = re.compile(r"^kit\b", re.IGNORECASE)
_SIZE_RE = re.compile(r"\b(" + "|".join(SIZE_TOKENS) + r")\b", re.IGNORECASE)
_GENDER_RE = re.compile(r"\b(" + "|".join(GENDER_TOKENS) + r")\b", re.IGNORECASE)


def normalize_kit_label(raw) -> str:
    """
    Etiqueta canónica de kit: "m masculino" y "M   Masculino" → "Kit M Masculino".
    Vacío o None devuelve "" (quien agrega debe saltarlo).
    """
    if raw is None:
        return ""
    s = _WS_RE.sub(" ", str(raw)).strip()
    if not s:
        return ""
    if not _KIT_PREFIX_RE.match(s):
        s = f"Kit {s}"
    s = _SIZE_RE.sub(lambda m: m.group(1).upper(), s)
    s = _GENDER_RE.sub(lambda m: m.group(1).capitalize(), s)
    return _KIT_PREFIX_RE.sub("Kit", s)


def combine_kits(kit1: str | None, kit2: str | None) -> str:
    """String viejo "<kit1> / <kit2>" para lectores anteriores a los campos por atleta."""
    return f"{(kit1 or '').strip()} / {(kit2 or '').strip()}"
