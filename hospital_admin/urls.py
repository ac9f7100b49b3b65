"""Hospital admin URL configuration.

Pages:
    /                  - Landing page (redirects to the dashboard when signed in)
    /auth/             - Sign in / sign out (core)
    /dashboard/        - Dashboard shell with patient, doctor and appointment tabs

API routes:
    /api/health/       - Data service health check (core)
    /api/stats/        - Entity counts (dashboard)
    /api/patients/     - Patients (patients)
    /api/doctors/      - Doctors (doctors)
    /api/appointments/ - Appointments (appointments)
"""

from django.urls import include, path

from hospital_admin.core.views import IndexView


urlpatterns = [
    path("", IndexView.as_view(), name="root"),
    path("auth/", include("hospital_admin.core.urls")),
    path("dashboard/", include("hospital_admin.dashboard.urls")),

    path("api/", include("hospital_admin.core.api_urls")),
    path("api/", include("hospital_admin.dashboard.api_urls")),
    path("api/", include("hospital_admin.patients.urls")),
    path("api/", include("hospital_admin.doctors.urls")),
    path("api/", include("hospital_admin.appointments.urls")),
]
