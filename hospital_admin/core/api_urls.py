"""Core API URLs.

Prefix: /api/
Routes:
    GET /api/health/ - Data service health check (no auth)
"""

from django.urls import path

from hospital_admin.core.views import health

app_name = 'core_api'

urlpatterns = [
    path('health/', health, name='health'),
]
