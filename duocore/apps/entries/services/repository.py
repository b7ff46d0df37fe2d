# duocore/apps/entries/services/repository.py
from __future__ import annotations

import functools
import logging
import uuid
from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, connections, transaction

from ..exceptions import DuplicateProof, NotFound, StorageUnavailable
from ..models import Entry

logger = logging.getLogger(__name__)


def _storage_errors(func):
    """Errores de base (salvo IntegrityError) → StorageUnavailable."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError:
            raise
        except DatabaseError as exc:
            logger.error("Base de datos no disponible en %s: %s", func.__name__, exc)
            raise StorageUnavailable(str(exc)) from exc
    return wrapper


class EntryRepository:
    """Acceso a Entry vía ORM. La unicidad del fingerprint la garantiza la base."""

    @_storage_errors
    def create_entry(self, **fields) -> uuid.UUID:
        fingerprint = fields.get("proof_fingerprint")
        try:
            with transaction.atomic():
                entry = Entry.objects.create(**fields)
        except IntegrityError as exc:
            # Dos envíos idénticos en paralelo: el segundo choca con el unique
            if fingerprint and Entry.objects.filter(proof_fingerprint=fingerprint).exists():
                logger.warning("Fingerprint %s ya insertado por otra petición", fingerprint[:12])
                raise DuplicateProof() from exc
            raise
        return entry.pk

    @_storage_errors
    def find_by_fingerprint(self, fingerprint: str) -> Optional[Entry]:
        if not fingerprint:
            return None
        return Entry.objects.filter(proof_fingerprint=fingerprint).first()

    @_storage_errors
    def find_by_id(self, entry_id) -> Optional[Entry]:
        try:
            return Entry.objects.get(pk=entry_id)
        except (Entry.DoesNotExist, ValidationError, ValueError):
            # UUID malformado llega como ValidationError
            return None

    @_storage_errors
    def update_status(self, entry_id, status: str) -> None:
        updated = Entry.objects.filter(pk=entry_id).update(status=status)
        if not updated:
            raise NotFound(entry_id)

    @_storage_errors
    def list_filtered(self, category: str | None = None, status: str | None = None) -> List[Entry]:
        qs = Entry.objects.all()
        if category:
            qs = qs.filter(duo_category=category)
        if status:
            qs = qs.filter(status=status)
        return list(qs.order_by("-submitted_at"))

    @_storage_errors
    def list_distinct_categories(self) -> List[str]:
        cats = (
            Entry.objects.exclude(duo_category="")
            .values_list("duo_category", flat=True)
            .distinct()
        )
        return sorted(set(cats))


def ensure_storage_available(alias: str = "default") -> None:
    """Abre conexión con la base; si falla el proceso no debe aceptar tráfico."""
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        logger.critical("Base de datos '%s' no disponible: %s", alias, exc)
        raise StorageUnavailable(str(exc)) from exc
