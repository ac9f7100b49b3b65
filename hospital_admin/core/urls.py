"""Core App URLs - Data service session.

Prefix: /auth/
Routes:
    GET/POST /auth/login/  - Sign in with email and password
    POST     /auth/logout/ - Sign out and return to the landing page
"""

from django.urls import path

from hospital_admin.core.views import LoginView, LogoutView

app_name = 'core'

urlpatterns = [
    path('login/', LoginView.as_view(), name='login'),
    path('logout/', LogoutView.as_view(), name='logout'),
]
