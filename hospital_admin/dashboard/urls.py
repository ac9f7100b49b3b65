"""
Dashboard URL Configuration

Prefix: /dashboard/
Each entity tab gets: list (+ POST create), new, <id>/edit, <id>/delete.
"""
from django.urls import path

from hospital_admin.patients.entities import PATIENTS

from .kpis import ENTITY_TABS
from .views import EntityDeleteView, EntityTabView

app_name = 'dashboard'


def _tab_urls(definition):
    name = definition.name
    return [
        path(f'{name}/', EntityTabView.as_view(definition=definition), name=name),
        path(f'{name}/new/', EntityTabView.as_view(definition=definition, mode='new'), name=f'{name}_new'),
        path(
            f'{name}/<str:pk>/edit/',
            EntityTabView.as_view(definition=definition, mode='edit'),
            name=f'{name}_edit',
        ),
        path(
            f'{name}/<str:pk>/delete/',
            EntityDeleteView.as_view(definition=definition),
            name=f'{name}_delete',
        ),
    ]


urlpatterns = [
    # Dashboard home: patients tab
    path('', EntityTabView.as_view(definition=PATIENTS), name='index'),
]
for _definition in ENTITY_TABS:
    urlpatterns += _tab_urls(_definition)
