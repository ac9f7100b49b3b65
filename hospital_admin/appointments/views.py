from hospital_admin.appointments.entities import APPOINTMENTS
from hospital_admin.core.api import EntityDetailAPIView, EntityListCreateAPIView


class AppointmentListCreateView(EntityListCreateAPIView):
    """List (searchable by patient or doctor name) or book appointments.

    List rows include the joined ``patients`` and ``doctors`` projections.
    """

    definition = APPOINTMENTS


class AppointmentDetailView(EntityDetailAPIView):
    definition = APPOINTMENTS
