from hospital_admin.core.api import EntityDetailAPIView, EntityListCreateAPIView
from hospital_admin.doctors.entities import DOCTORS


class DoctorListCreateView(EntityListCreateAPIView):
    """List (searchable by name, specialization, email) or add doctors."""

    definition = DOCTORS


class DoctorDetailView(EntityDetailAPIView):
    definition = DOCTORS
