"""Dashboard API URLs.

Prefix: /api/
Routes:
    GET /api/stats/ - Row counts for patients, doctors and appointments
"""

from django.urls import path

from .views import StatsAPIView

app_name = 'dashboard_api'

urlpatterns = [
    path('stats/', StatsAPIView.as_view(), name='stats'),
]
