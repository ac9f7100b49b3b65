"""Client for the hosted data service.

The data service owns persistence, authentication and query execution for
all three tables (``patients``, ``doctors``, ``appointments``). This module
only adapts its REST interface:

- ``/rest/v1/<table>`` (PostgREST) for list/insert/update/delete/count
- ``/auth/v1/...`` (GoTrue) for sign-in, sign-out and the current user

Every failure (transport error or HTTP status >= 400) is raised as
``DataServiceError``. Nothing here retries.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.utils.encoders import JSONEncoder

from hospital_admin.core.exceptions import DataServiceError

logger = logging.getLogger(__name__)


class DataService:
    """Interface of the data service as used by controllers and views.

    Subclasses implement the transport. Records are plain dicts; ``id`` is
    assigned by the service on insert.
    """

    def list(self, entity: str, *, order_field: str, ascending: bool = True, select: str = '*') -> list[dict]:
        raise NotImplementedError

    def insert(self, entity: str, record: dict) -> dict:
        raise NotImplementedError

    def update(self, entity: str, record_id: Any, record: dict) -> dict:
        raise NotImplementedError

    def delete(self, entity: str, record_id: Any) -> None:
        raise NotImplementedError

    def count_of(self, entity: str) -> int:
        raise NotImplementedError

    def current_user_id(self) -> str | None:
        raise NotImplementedError

    def sign_in(self, email: str, password: str) -> dict:
        raise NotImplementedError

    def sign_out(self) -> None:
        raise NotImplementedError

    def ping(self) -> bool:
        raise NotImplementedError


class SupabaseDataService(DataService):
    """Supabase implementation (PostgREST + GoTrue over HTTPS)."""

    def __init__(
        self,
        *,
        url: str,
        api_key: str,
        access_token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        if not url:
            raise DataServiceError('Data service URL is not configured.')
        self.url = url.rstrip('/')
        self.api_key = api_key
        self.access_token = access_token
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self, extra: dict | None = None) -> dict[str, str]:
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.access_token or self.api_key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, path: str, *, params=None, payload=None, headers=None):
        url = f'{self.url}{path}'
        body = None
        if payload is not None:
            body = json.dumps(payload, cls=JSONEncoder)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                data=body,
                headers=self._headers(headers),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning('Data service request failed (%s %s): %s', method, path, exc)
            raise DataServiceError(f'Data service unreachable: {exc}') from exc

        if response.status_code >= 400:
            detail = _error_detail(response)
            logger.warning(
                'Data service returned %s for %s %s: %s',
                response.status_code, method, path, detail,
            )
            raise DataServiceError(
                f'Data service request failed with status {response.status_code}',
                status_code=response.status_code,
                detail=detail,
            )
        return response

    @staticmethod
    def _json(response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DataServiceError('Data service returned invalid JSON.') from exc

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def list(self, entity, *, order_field, ascending=True, select='*'):
        direction = 'asc' if ascending else 'desc'
        response = self._request(
            'GET',
            f'/rest/v1/{entity}',
            params={'select': select, 'order': f'{order_field}.{direction}'},
        )
        return self._json(response) or []

    def insert(self, entity, record):
        response = self._request(
            'POST',
            f'/rest/v1/{entity}',
            payload=record,
            headers={'Prefer': 'return=representation'},
        )
        return _first_row(self._json(response))

    def update(self, entity, record_id, record):
        response = self._request(
            'PATCH',
            f'/rest/v1/{entity}',
            params={'id': f'eq.{record_id}'},
            payload=record,
            headers={'Prefer': 'return=representation'},
        )
        return _first_row(self._json(response))

    def delete(self, entity, record_id):
        self._request('DELETE', f'/rest/v1/{entity}', params={'id': f'eq.{record_id}'})

    def count_of(self, entity):
        response = self._request(
            'HEAD',
            f'/rest/v1/{entity}',
            params={'select': 'id'},
            headers={'Prefer': 'count=exact'},
        )
        return _parse_content_range(response.headers.get('Content-Range', ''))

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def current_user_id(self):
        if not self.access_token:
            return None
        try:
            response = self._request('GET', '/auth/v1/user')
        except DataServiceError as exc:
            if exc.status_code in (401, 403):
                return None
            raise
        user = self._json(response) or {}
        return user.get('id')

    def sign_in(self, email, password):
        response = self._request(
            'POST',
            '/auth/v1/token',
            params={'grant_type': 'password'},
            payload={'email': email, 'password': password},
        )
        session = self._json(response) or {}
        if not session.get('access_token'):
            raise DataServiceError('Data service did not return an access token.')
        self.access_token = session['access_token']
        return session

    def sign_out(self):
        if not self.access_token:
            return
        self._request('POST', '/auth/v1/logout')
        self.access_token = None

    def ping(self):
        self._request('GET', '/rest/v1/')
        return True


def _error_detail(response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text[:500]


def _first_row(data: Any) -> dict:
    if isinstance(data, list):
        return data[0] if data else {}
    return data or {}


def _parse_content_range(value: str) -> int:
    """Parse the total from a PostgREST ``Content-Range`` header (``0-24/57``, ``*/0``)."""
    _, _, total = value.partition('/')
    try:
        return int(total)
    except ValueError as exc:
        raise DataServiceError(f'Data service returned no usable count: {value!r}') from exc


def get_data_service(access_token: str | None = None) -> DataService:
    """Build the configured data service for one request."""
    config = settings.DATA_SERVICE
    backend = import_string(config['BACKEND'])
    return backend(
        url=config.get('URL', ''),
        api_key=config.get('API_KEY', ''),
        access_token=access_token,
        timeout=config.get('TIMEOUT', 10.0),
    )
