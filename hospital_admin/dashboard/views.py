"""
Dashboard Views

The dashboard shell shows the entity counts and one tab per entity. Each
tab is driven by its own ``EntityController``.
"""

import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import urlencode
from django.views import View
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_admin.core.context import context_for_api_request, context_for_request
from hospital_admin.core.exceptions import ValidationFailed
from hospital_admin.core.views import SessionRequiredMixin

from .kpis import ENTITY_TABS, get_entity_counts
from .widgets import build_form_fields, build_kpi_cards, build_rows, build_tabs

logger = logging.getLogger(__name__)


class _EntityTabBaseView(SessionRequiredMixin, View):
    definition = None
    controller = None

    def dispatch(self, request, *args, **kwargs):
        response = super().dispatch(request, *args, **kwargs)
        error = self.controller.last_error if self.controller is not None else None
        if error is not None and error.status_code == 401:
            return self.session_expired(request)
        return response

    def session_expired(self, request):
        """The data service rejected the session token: sign out locally."""
        logger.info('Data service session expired, signing out (%s)', self.definition.name)
        # Drop the failure notifications queued for this request.
        for _ in messages.get_messages(request):
            pass
        request.session.flush()
        messages.warning(request, 'Your session has expired. Please sign in again.')
        return redirect('root')

    def get_controller(self, request):
        self.context = context_for_request(request)
        self.controller = self.context.controller_for(self.definition)
        self.controller.set_search_term(request.GET.get('q'))
        return self.controller

    def tab_url(self, controller):
        url = reverse(f'dashboard:{self.definition.name}')
        if controller.search_term:
            url = f"{url}?{urlencode({'q': controller.search_term})}"
        return url


class EntityTabView(_EntityTabBaseView):
    """Dashboard tab: list + search, and the create/edit dialog.

    mode: None (list only), 'new' (create dialog) or 'edit' (edit dialog).
    """

    mode = None
    template_name = 'dashboard/index.html'

    def form_values(self, request, controller):
        return {name: request.POST.get(name, '') for name in controller.form_fields}

    def render_tab(self, request, controller, status=200):
        if controller.dialog_open:
            controller.load_choices()

        counts = get_entity_counts(self.context.data_service)
        context = {
            'title': 'Hospital Management System',
            'kpi_cards': build_kpi_cards(counts),
            'tabs': build_tabs(ENTITY_TABS, self.definition),
            'definition': self.definition,
            'columns': [label for label, _ in self.definition.list_columns],
            'controller': controller,
            'rows': build_rows(controller),
            'form_fields': build_form_fields(controller) if controller.dialog_open else [],
            'list_url': self.tab_url(controller),
            'new_url': reverse(f'dashboard:{self.definition.name}_new'),
            'form_action': request.get_full_path(),
        }
        return render(request, self.template_name, context, status=status)

    def _open_edit(self, controller, pk):
        record = controller.find(pk)
        if record is None:
            raise Http404(f'{self.definition.label.capitalize()} {pk} not found')
        controller.open_edit(record)

    def get(self, request, pk=None):
        controller = self.get_controller(request)
        loaded = controller.refresh()
        if self.mode == 'new':
            controller.open_create()
        elif self.mode == 'edit' and loaded:
            self._open_edit(controller, pk)
        return self.render_tab(request, controller)

    def post(self, request, pk=None):
        controller = self.get_controller(request)
        if self.mode == 'edit':
            if not controller.refresh():
                return redirect(self.tab_url(controller))
            self._open_edit(controller, pk)
        else:
            controller.open_create()

        controller.update_form(self.form_values(request, controller))
        if controller.submit():
            return redirect(self.tab_url(controller))

        status = 400 if isinstance(controller.last_error, ValidationFailed) else 200
        if self.mode != 'edit':
            controller.refresh()
        return self.render_tab(request, controller, status=status)


class EntityDeleteView(_EntityTabBaseView):
    def post(self, request, pk):
        controller = self.get_controller(request)
        controller.remove(pk)
        return redirect(self.tab_url(controller))


class StatsAPIView(APIView):
    """API endpoint for the dashboard counts."""

    def get(self, request):
        context = context_for_api_request(request)
        return Response(get_entity_counts(context.data_service))
