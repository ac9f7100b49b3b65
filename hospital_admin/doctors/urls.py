"""Doctors App URLs.

Prefix: /api/
Routes:
    GET/POST       /api/doctors/       - List/Create doctors
    PUT/DELETE     /api/doctors/<id>/  - Update/Delete doctor
"""

from django.urls import path

from hospital_admin.doctors.views import DoctorDetailView, DoctorListCreateView

app_name = 'doctors'

urlpatterns = [
    path('doctors/', DoctorListCreateView.as_view(), name='list'),
    path('doctors/<str:pk>/', DoctorDetailView.as_view(), name='detail'),
]
