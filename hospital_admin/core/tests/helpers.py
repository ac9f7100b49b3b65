from __future__ import annotations

from unittest.mock import Mock

from django.conf import settings

from hospital_admin.core.data_service import DataService


def mock_data_service(rows=None, user_id="user-1") -> Mock:
    """Data service double returning ``rows`` for every list call."""
    service = Mock(spec=DataService)
    service.list.return_value = list(rows or [])
    service.insert.side_effect = lambda entity, record: {"id": "new-1", **record}
    service.update.side_effect = lambda entity, record_id, record: {"id": record_id, **record}
    service.delete.return_value = None
    service.count_of.return_value = 0
    service.current_user_id.return_value = user_id
    return service


def sign_in_client(client, token="token-123"):
    """Store a data service token in the (signed cookie) session of ``client``."""
    session = client.session
    session[settings.DATA_SERVICE_SESSION_KEY] = token
    session.save()
    client.cookies[settings.SESSION_COOKIE_NAME] = session.session_key
