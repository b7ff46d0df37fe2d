# duocore/apps/entries/services/review.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from django.conf import settings
from django.db import transaction

from ..exceptions import InvalidTransition, NotFound
from ..models import Entry
from .notifications import EmailNotifier, deliver_safely, run_detached
from .repository import EntryRepository

logger = logging.getLogger(__name__)

REVIEW_TARGETS = (Entry.STATUS_ACCEPTED, Entry.STATUS_REJECTED)


class ReviewWorkflow:
    """
    Aprueba o rechaza una inscripción.

    Primero se guarda el status (es la verdad), después se intenta el aviso
    por email fuera de la petición. Si el aviso falla sólo queda en el log.
    """

    def __init__(
        self,
        repository: Optional[EntryRepository] = None,
        notifier: Optional[EmailNotifier] = None,
        dispatch: Optional[Callable] = None,
        notify: Optional[bool] = None,
    ):
        self.repository = repository or EntryRepository()
        self.notifier = notifier or EmailNotifier()
        self.dispatch = dispatch or run_detached
        self.notify = settings.DUO_NOTIFY_STATUS_CHANGES if notify is None else notify

    def transition(self, entry_id, target_status: str) -> Entry:
        if target_status not in REVIEW_TARGETS:
            raise InvalidTransition(f"Status destino inválido: {target_status!r}")

        entry = self.repository.find_by_id(entry_id)
        if entry is None:
            raise NotFound(entry_id)

        if entry.is_terminal:
            # Se permite (como siempre) pero se reenvía el email: dejar rastro
            logger.warning(
                "Inscrição %s já estava %s; nova transição para %s",
                entry.pk, entry.status, target_status,
            )

        self.repository.update_status(entry.pk, target_status)
        entry.status = target_status
        logger.info("Inscrição %s → %s", entry.pk, target_status)

        if self.notify:
            # Sólo se avisa si el cambio quedó confirmado en la base
            transaction.on_commit(
                lambda: self.dispatch(deliver_safely, self.notifier.send_status_change, entry, target_status)
            )
        return entry
