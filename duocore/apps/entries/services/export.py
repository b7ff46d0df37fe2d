# duocore/apps/entries/services/export.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional

from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Font

from .uniforms import sorted_totals

DATE_FORMAT = "%d/%m/%Y %H:%M"

ENTRY_SHEET_TITLE = "Inscrições"
UNIFORM_SHEET_TITLE = "Uniformes"

ENTRY_COLUMNS = [
    "Data",
    "Dupla",
    "Categoria",
    "Atleta 1",
    "Telefone 1",
    "Email 1",
    "Cidade 1",
    "Kit 1",
    "Atleta 2",
    "Telefone 2",
    "Email 2",
    "Cidade 2",
    "Kit 2",
    "Status",
    "Score",
    "Comprovante",
    "Instagram",
]

UNIFORM_COLUMNS = ["Kit", "Quantidade"]


@dataclass
class Sheet:
    title: str
    header: List[str]
    rows: List[List[Any]] = field(default_factory=list)


@dataclass
class ExportSheets:
    entries: Sheet
    uniforms: Sheet

    def __iter__(self):
        yield self.entries
        yield self.uniforms


def format_submitted_at(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime(DATE_FORMAT)


def _entry_row(e) -> List[Any]:
    status_label = e.get_status_display() if hasattr(e, "get_status_display") else e.status
    a1, a2 = e.athlete(1), e.athlete(2)
    return [
        format_submitted_at(e.submitted_at),
        e.duo_name,
        e.duo_category,
        a1.name,
        a1.phone,
        a1.email,
        a1.city,
        a1.kit,
        a2.name,
        a2.phone,
        a2.email,
        a2.city,
        a2.kit,
        status_label,
        e.validation_score,
        e.payment_proof_url,
        e.duo_instagram,
    ]


def project_export(entries: Iterable[Any], totals: Mapping[str, int]) -> ExportSheets:
    """
    Proyección pura: las inscripciones ya vienen filtradas y ordenadas
    (más nuevas primero) y los totales ya calculados. Aquí no se filtra ni se suma.
    """
    return ExportSheets(
        entries=Sheet(ENTRY_SHEET_TITLE, list(ENTRY_COLUMNS), [_entry_row(e) for e in entries]),
        uniforms=Sheet(
            UNIFORM_SHEET_TITLE,
            list(UNIFORM_COLUMNS),
            [[label, count] for label, count in sorted_totals(totals)],
        ),
    )


def build_workbook(sheets: ExportSheets) -> Workbook:
    wb = Workbook()
    wb.remove(wb.active)
    for sheet in sheets:
        ws = wb.create_sheet(title=sheet.title)
        ws.append(sheet.header)
        for cell in ws[1]:
            cell.font = Font(bold=True)
        for row in sheet.rows:
            ws.append(row)
        ws.freeze_panes = "A2"
    return wb


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or timezone.localtime()
    return f"inscricoes_{now.strftime('%Y%m%d_%H%M%S')}.xlsx"
