from __future__ import annotations

import logging

from django.http import (
    HttpRequest,
    HttpResponse,
    HttpResponseNotAllowed,
    HttpResponseServerError,
    JsonResponse,
)
from django.shortcuts import redirect, render

from .exceptions import IntakeError, StorageUnavailable
from .services.field_map import field_map
from .services.intake import IntakePipeline

logger = logging.getLogger(__name__)

PROOF_FIELD = "paymentProof"


def registration_form(request: HttpRequest) -> HttpResponse:
    # Nombres de los inputs según la versión vigente de la tabla de campos
    inputs = {target.replace(".", "_"): key for key, target in field_map().items()}
    return render(request, "entries/form.html", {"inputs": inputs, "proof_field": PROOF_FIELD})


def submit(request: HttpRequest) -> HttpResponse:
    """
    Recibe el formulario de inscripción con el comprovante.
    Éxito → redirige a la página de agradecimiento.
    """
    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    try:
        IntakePipeline().submit(request.POST, request.FILES.get(PROOF_FIELD))
    except IntakeError as e:
        return HttpResponse(e.message, status=e.status_code, content_type="text/plain; charset=utf-8")
    except StorageUnavailable:
        return HttpResponseServerError("Erro interno. Tente novamente em instantes.")
    return redirect("entries_thanks")


def thanks(request: HttpRequest) -> HttpResponse:
    return render(request, "entries/thanks.html")


# -------- Healthcheck simple --------
def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})
