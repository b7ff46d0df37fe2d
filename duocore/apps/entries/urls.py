from django.urls import path

from . import views, views_admin

urlpatterns = [
    path("", views.registration_form, name="entries_form"),
    path("submit/", views.submit, name="entries_submit"),
    path("obrigado/", views.thanks, name="entries_thanks"),

    # Panel de staff
    path("painel/", views_admin.entry_list, name="entries_admin_list"),
    path("painel/exportar/", views_admin.entry_export, name="entries_admin_export"),
    path("painel/<uuid:pk>/status/", views_admin.entry_set_status, name="entries_admin_set_status"),
]
