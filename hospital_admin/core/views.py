"""Core app views.

Contains:
- health: Data service health check (JSON)
- IndexView: Landing page, redirects signed-in users to the dashboard
- LoginView / LogoutView: Data service session handling
- SessionRequiredMixin: Guard for pages that need a data service session
"""

import logging

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views import View

from hospital_admin.core.context import session_token
from hospital_admin.core.data_service import get_data_service
from hospital_admin.core.exceptions import DataServiceError
from hospital_admin.core.forms import LoginForm

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        get_data_service().ping()
    except DataServiceError as exc:
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})


class SessionRequiredMixin:
    """Redirect to the landing page when no data service session exists."""

    def dispatch(self, request, *args, **kwargs):
        if not session_token(request):
            return redirect('root')
        return super().dispatch(request, *args, **kwargs)


class IndexView(View):
    """Landing page with a short feature overview."""

    def get(self, request):
        if session_token(request):
            return redirect('dashboard:index')
        return render(request, 'core/index.html')


class LoginView(View):
    template_name = 'core/login.html'

    def get(self, request):
        if session_token(request):
            return redirect('dashboard:index')
        return render(request, self.template_name, {'form': LoginForm()})

    def post(self, request):
        form = LoginForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {'form': form}, status=400)

        try:
            session = get_data_service().sign_in(
                form.cleaned_data['email'],
                form.cleaned_data['password'],
            )
        except DataServiceError as exc:
            logger.info('Sign-in failed for %s: %s', form.cleaned_data['email'], exc)
            messages.error(request, 'Invalid email or password')
            return render(request, self.template_name, {'form': form}, status=401)

        request.session.cycle_key()
        request.session[settings.DATA_SERVICE_SESSION_KEY] = session['access_token']
        return redirect('dashboard:index')


class LogoutView(View):
    def post(self, request):
        token = session_token(request)
        if token:
            try:
                get_data_service(token).sign_out()
            except DataServiceError as exc:
                logger.warning('Sign-out at data service failed: %s', exc)

        request.session.flush()
        messages.success(request, 'You have been logged out successfully')
        return redirect('root')
