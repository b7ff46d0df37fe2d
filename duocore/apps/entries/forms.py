from __future__ import annotations

from django import forms

from .models import Entry
from .services.repository import EntryRepository


class EntryFilterForm(forms.Form):
    """
    Filtros del panel (GET). Categorías salen de las inscripciones existentes,
    así que siempre reflejan lo que hay en la base.
    """
    category = forms.ChoiceField(required=False, label="Categoria")
    status = forms.ChoiceField(
        required=False,
        label="Status",
        choices=(("", "Todos"),) + Entry.STATUS_CHOICES,
    )

    def __init__(self, *args, categories=None, **kwargs):
        super().__init__(*args, **kwargs)
        if categories is None:
            categories = EntryRepository().list_distinct_categories()
        self.fields["category"].choices = [("", "Todas")] + [(c, c) for c in categories]

    def filters(self) -> dict:
        """
        Cada filtro se aplica por separado. Un valor fuera de las opciones
        se usa tal cual (no coincide con nada) en vez de descartarlo.
        """
        if not self.is_bound:
            return {"category": None, "status": None}
        self.is_valid()
        result = {}
        for name in ("category", "status"):
            if name in self.cleaned_data:
                value = self.cleaned_data[name]
            else:
                value = (self.data.get(name) or "").strip()
            result[name] = value or None
        return result


class StatusChangeForm(forms.Form):
    status = forms.ChoiceField(
        choices=(
            (Entry.STATUS_ACCEPTED, "Aprovar"),
            (Entry.STATUS_REJECTED, "Recusar"),
        )
    )
