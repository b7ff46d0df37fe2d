from __future__ import annotations

from django.contrib import admin, messages
from django.utils.html import format_html

from .exceptions import StorageUnavailable
from .models import Entry
from .services.review import ReviewWorkflow


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    list_display = (
        "submitted_at",
        "duo_label",
        "duo_category",
        "athlete1_name",
        "athlete2_name",
        "status",
        "validation_score",
        "proof_link",
    )
    list_filter = ("status", "duo_category")
    search_fields = (
        "duo_name",
        "athlete1_name",
        "athlete2_name",
        "athlete1_email",
        "athlete2_email",
        "duo_instagram",
    )
    readonly_fields = ("id", "submitted_at", "proof_fingerprint", "status", "validation_score")
    date_hierarchy = "submitted_at"
    actions = ["approve_entries", "reject_entries"]

    def duo_label(self, obj: Entry) -> str:
        return obj.duo_name or f"{obj.athlete1_name} & {obj.athlete2_name}"
    duo_label.short_description = "Dupla"

    def proof_link(self, obj: Entry) -> str:
        if not obj.payment_proof_url:
            return "-"
        return format_html('<a href="{}" target="_blank">ver</a>', obj.payment_proof_url)
    proof_link.short_description = "Comprovante"

    def _transition(self, request, queryset, status: str) -> None:
        workflow = ReviewWorkflow()
        done = 0
        try:
            for entry in queryset:
                workflow.transition(entry.pk, status)
                done += 1
        except StorageUnavailable:
            self.message_user(
                request,
                f"Base de dados indisponível; {done} inscrição(ões) atualizada(s) antes da falha.",
                messages.ERROR,
            )
            return
        self.message_user(request, f"{done} inscrição(ões) atualizada(s).", messages.SUCCESS)

    @admin.action(description="Aprovar inscrições selecionadas")
    def approve_entries(self, request, queryset):
        self._transition(request, queryset, Entry.STATUS_ACCEPTED)

    @admin.action(description="Recusar inscrições selecionadas")
    def reject_entries(self, request, queryset):
        self._transition(request, queryset, Entry.STATUS_REJECTED)
