from hospital_admin.core.api import EntityDetailAPIView, EntityListCreateAPIView
from hospital_admin.patients.entities import PATIENTS


class PatientListCreateView(EntityListCreateAPIView):
    """List (searchable by name, phone, email) or register patients."""

    definition = PATIENTS


class PatientDetailView(EntityDetailAPIView):
    """Update or delete a patient."""

    definition = PATIENTS
