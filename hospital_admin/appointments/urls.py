"""Appointments App URLs.

Prefix: /api/
Routes:
    GET/POST       /api/appointments/       - List/Book appointments
    PUT/DELETE     /api/appointments/<id>/  - Update/Delete appointment
"""

from django.urls import path

from hospital_admin.appointments.views import (
    AppointmentDetailView,
    AppointmentListCreateView,
)

app_name = 'appointments'

urlpatterns = [
    path('appointments/', AppointmentListCreateView.as_view(), name='list'),
    path('appointments/<str:pk>/', AppointmentDetailView.as_view(), name='detail'),
]
