from __future__ import annotations

from io import BytesIO

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseServerError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .exceptions import InvalidTransition, NotFound, StorageUnavailable
from .forms import EntryFilterForm, StatusChangeForm
from .services.export import build_workbook, export_filename, project_export
from .services.repository import EntryRepository
from .services.review import ReviewWorkflow
from .services.uniforms import aggregate_uniforms, sorted_totals

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _filtered(request: HttpRequest, repo: EntryRepository):
    form = EntryFilterForm(request.GET or None, categories=repo.list_distinct_categories())
    return form, repo.list_filtered(**form.filters())


@staff_member_required
def entry_list(request: HttpRequest) -> HttpResponse:
    """
    Panel de inscripciones:
      - filtros por categoría y status (GET)
      - totales de uniformes de lo filtrado, ordenados por etiqueta
    """
    repo = EntryRepository()
    try:
        form, entries = _filtered(request, repo)
    except StorageUnavailable:
        return HttpResponseServerError("Base de dados indisponível.")

    ctx = {
        "form": form,
        "entries": entries,
        "uniform_totals": sorted_totals(aggregate_uniforms(entries)),
        "export_query": request.GET.urlencode(),
    }
    return render(request, "entries/admin_list.html", ctx)


@staff_member_required
@require_POST
def entry_set_status(request: HttpRequest, pk) -> HttpResponse:
    form = StatusChangeForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Status inválido.")
        return redirect(reverse("entries_admin_list"))

    try:
        entry = ReviewWorkflow().transition(pk, form.cleaned_data["status"])
    except NotFound:
        raise Http404("Inscrição não encontrada.")
    except InvalidTransition as e:
        messages.error(request, str(e))
    except StorageUnavailable:
        return HttpResponseServerError("Base de dados indisponível.")
    else:
        messages.success(request, f"Inscrição de {entry} marcada como {entry.get_status_display()}.")

    next_url = request.POST.get("next") or ""
    if not url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        next_url = reverse("entries_admin_list")
    return redirect(next_url)


@staff_member_required
def entry_export(request: HttpRequest) -> HttpResponse:
    """Planilla .xlsx (inscripciones + uniformes) con los mismos filtros del panel."""
    repo = EntryRepository()
    try:
        _, entries = _filtered(request, repo)
    except StorageUnavailable:
        return HttpResponseServerError("Base de dados indisponível.")

    wb = build_workbook(project_export(entries, aggregate_uniforms(entries)))
    buf = BytesIO()
    wb.save(buf)
    response = HttpResponse(buf.getvalue(), content_type=XLSX_CONTENT_TYPE)
    response["Content-Disposition"] = f'attachment; filename="{export_filename()}"'
    return response
