"""Generic JSON API over an ``EntityController``.

Each entity app subclasses these views and sets ``definition``:

    GET     /api/<plural>/?search=   filtered list
    POST    /api/<plural>/           create
    PUT     /api/<plural>/<id>/      replace the editable fields
    DELETE  /api/<plural>/<id>/      delete
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_admin.core.context import context_for_api_request
from hospital_admin.core.exceptions import ValidationFailed
from hospital_admin.core.schema import EntityDefinition


class _EntityAPIView(APIView):
    definition: EntityDefinition = None

    def get_controller(self):
        self.context = context_for_api_request(self.request)
        return self.context.controller_for(self.definition)

    def notifications(self) -> list[dict]:
        return [n.to_dict() for n in self.context.notifications.notifications]

    def form_values(self, controller) -> dict:
        data = self.request.data
        return {name: data[name] for name in controller.form_fields if name in data}

    def failure_response(self, controller) -> Response:
        error = controller.last_error
        if error.status_code == 401:
            raise NotAuthenticated('Data service session expired.')
        body = error.to_dict()
        body['notifications'] = self.notifications()
        if isinstance(error, ValidationFailed):
            return Response(body, status=status.HTTP_400_BAD_REQUEST)
        return Response(body, status=status.HTTP_502_BAD_GATEWAY)


class EntityListCreateAPIView(_EntityAPIView):
    """List (optionally searched) or create records of one entity."""

    def get(self, request, *args, **kwargs):
        controller = self.get_controller()
        controller.set_search_term(request.query_params.get('search'))
        if not controller.refresh():
            return self.failure_response(controller)
        return Response(list(controller.filtered()))

    def post(self, request, *args, **kwargs):
        controller = self.get_controller()
        controller.open_create()
        controller.update_form(self.form_values(controller))
        if not controller.submit():
            return self.failure_response(controller)
        return Response(
            {'record': controller.last_saved, 'notifications': self.notifications()},
            status=status.HTTP_201_CREATED,
        )


class EntityDetailAPIView(_EntityAPIView):
    """Update or delete a single record of one entity."""

    def put(self, request, pk, *args, **kwargs):
        controller = self.get_controller()
        if not controller.refresh():
            return self.failure_response(controller)
        record = controller.find(pk)
        if record is None:
            raise NotFound(f'{self.definition.label.capitalize()} {pk} not found.')

        controller.open_edit(record)
        controller.update_form(self.form_values(controller))
        if not controller.submit():
            return self.failure_response(controller)
        return Response({'record': controller.last_saved, 'notifications': self.notifications()})

    def delete(self, request, pk, *args, **kwargs):
        controller = self.get_controller()
        if not controller.remove(pk):
            return self.failure_response(controller)
        return Response(status=status.HTTP_204_NO_CONTENT)
