"""Per-request wiring of data service, notifications and controllers."""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

from hospital_admin.core.controller import EntityController
from hospital_admin.core.data_service import DataService, get_data_service
from hospital_admin.core.notifications import (
    CollectingNotificationSink,
    MessagesNotificationSink,
    NotificationSink,
)
from hospital_admin.core.schema import EntityDefinition


@dataclass
class ControllerContext:
    data_service: DataService
    notifications: NotificationSink

    def controller_for(self, definition: EntityDefinition) -> EntityController:
        return EntityController(
            definition,
            self.data_service,
            self.notifications,
            current_user=self.data_service.current_user_id,
        )


def session_token(request) -> str | None:
    return request.session.get(settings.DATA_SERVICE_SESSION_KEY)


def context_for_request(request) -> ControllerContext:
    """Context for HTML pages: session token + Django messages."""
    return ControllerContext(
        data_service=get_data_service(session_token(request)),
        notifications=MessagesNotificationSink(request),
    )


def context_for_api_request(request) -> ControllerContext:
    """Context for API calls: bearer token + notifications collected for the response."""
    return ControllerContext(
        data_service=get_data_service(request.auth),
        notifications=CollectingNotificationSink(),
    )
