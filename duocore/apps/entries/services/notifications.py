from __future__ import annotations

import logging
import threading
from typing import Callable

from django.conf import settings
from django.core.mail import send_mail
from django.db import close_old_connections

from ..exceptions import NotificationFailure

logger = logging.getLogger(__name__)

SUBJECTS = {
    "accepted": "Inscrição aprovada",
    "rejected": "Inscrição recusada",
}

BODIES = {
    "accepted": (
        "Olá {names}!\n\n"
        "A inscrição da dupla {duo} na categoria {category} foi APROVADA.\n"
        "Nos vemos no evento!\n"
    ),
    "rejected": (
        "Olá {names}!\n\n"
        "A inscrição da dupla {duo} na categoria {category} foi RECUSADA.\n"
        "Se acredita que houve um engano, responda este email com o comprovante.\n"
    ),
}


class EmailNotifier:
    """Avisa a ambos atletas del cambio de status usando el backend de email de Django."""

    def __init__(self, from_email: str | None = None):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send_status_change(self, entry, new_status: str) -> None:
        recipients = entry.contact_emails()
        if not recipients:
            logger.info("Inscrição %s sem emails; aviso de status omitido", entry.pk)
            return
        if new_status not in SUBJECTS:
            raise NotificationFailure(f"Status sin plantilla de email: {new_status}")

        names = " e ".join(n for n in (entry.athlete1_name, entry.athlete2_name) if n) or "atletas"
        body = BODIES[new_status].format(
            names=names,
            duo=entry.duo_name or "-",
            category=entry.duo_category,
        )
        try:
            send_mail(
                subject=SUBJECTS[new_status],
                message=body,
                from_email=self.from_email,
                recipient_list=recipients,
                fail_silently=False,
            )
        except Exception as exc:
            raise NotificationFailure(str(exc)) from exc


def deliver_safely(send: Callable, entry, new_status: str) -> bool:
    """Ejecuta el envío; cualquier error queda en el log y no se propaga."""
    try:
        send(entry, new_status)
    except Exception:
        logger.exception("Falha ao notificar inscrição %s (%s)", entry.pk, new_status)
        return False
    return True


def run_detached(func: Callable, *args) -> None:
    """Corre func en un thread daemon; la respuesta HTTP no lo espera."""
    def _target():
        try:
            func(*args)
        finally:
            close_old_connections()

    threading.Thread(target=_target, daemon=True, name="duo-notify").start()


def run_inline(func: Callable, *args) -> None:
    func(*args)
