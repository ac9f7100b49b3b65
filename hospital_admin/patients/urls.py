"""Patients App URLs.

Prefix: /api/
Routes:
    GET/POST       /api/patients/       - List/Create patients
    PUT/DELETE     /api/patients/<id>/  - Update/Delete patient
"""

from django.urls import path

from hospital_admin.patients.views import (
    PatientDetailView,
    PatientListCreateView,
)

app_name = 'patients'

urlpatterns = [
    path('patients/', PatientListCreateView.as_view(), name='list'),
    path('patients/<str:pk>/', PatientDetailView.as_view(), name='detail'),
]
