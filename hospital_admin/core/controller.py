"""Generic list/search/edit controller for one entity table.

One ``EntityController`` drives the whole lifecycle of a management tab:

    refresh()        load the list from the data service
    filtered()       client-side search over the loaded items
    open_create()    start a new record in the dialog
    open_edit(r)     start editing an existing record
    submit()         validate + insert/update, then refresh
    remove(id)       delete, then refresh

The controller trusts only server round-trips: it never patches ``items``
locally. Failures are reported to the injected notification sink and leave
the current state untouched.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterator

from hospital_admin.core.data_service import DataService
from hospital_admin.core.exceptions import (
    ControllerError,
    DataServiceError,
    FetchFailed,
    ValidationFailed,
    WriteFailed,
)
from hospital_admin.core.notifications import NotificationSink
from hospital_admin.core.schema import EntityDefinition, lookup
from hospital_admin.core.utils import log_entity_action

logger = logging.getLogger(__name__)


class FilteredItems:
    """Lazy, restartable view of the items matching a search term."""

    def __init__(self, items: list[dict], search_fields: tuple[str, ...], term: str):
        self._items = items
        self._search_fields = search_fields
        self._needle = term.lower()

    def matches(self, record: dict) -> bool:
        if not self._needle:
            return True
        for path in self._search_fields:
            value = lookup(record, path)
            if value is None:
                continue
            if self._needle in str(value).lower():
                return True
        return False

    def __iter__(self) -> Iterator[dict]:
        return (record for record in self._items if self.matches(record))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class EntityController:
    """CRUD + search state for one entity.

    Args:
        definition: What the entity looks like and where it is stored.
        data_service: Backend client used for every read and write.
        notifications: Sink receiving success/error notifications.
        current_user: Accessor for the acting user's id, consulted on every
            insert. Defaults to ``data_service.current_user_id``.
    """

    def __init__(
        self,
        definition: EntityDefinition,
        data_service: DataService,
        notifications: NotificationSink,
        current_user: Callable[[], Any] | None = None,
    ):
        self.definition = definition
        self.data_service = data_service
        self.notifications = notifications
        self.current_user = current_user or data_service.current_user_id

        self.items: list[dict] = []
        self.search_term = ''
        self.dialog_open = False
        self.editing_item: dict | None = None
        self.form_fields: dict[str, Any] = definition.defaults()
        self.errors: dict[str, list[str]] = {}
        self.last_error: ControllerError | None = None
        self.choices: dict[str, list[tuple[Any, str]]] = {}
        self.last_saved: dict | None = None

        self._lock = threading.Lock()
        self._issued = 0
        self._submitting = False

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """Reload ``items``. Returns True if this response was applied."""
        with self._lock:
            self._issued += 1
            ticket = self._issued

        d = self.definition
        try:
            rows = self.data_service.list(
                d.name,
                order_field=d.order_field,
                ascending=d.ascending,
                select=d.select_clause(),
            )
        except DataServiceError as exc:
            with self._lock:
                if ticket != self._issued:
                    logger.debug('Dropping stale failed refresh of %s (ticket=%s)', d.name, ticket)
                    return False
            message = f'Failed to fetch {d.label_plural}'
            self.last_error = FetchFailed(message, entity=d.name, status_code=exc.status_code)
            self.notifications.error(message)
            logger.warning('%s: %s', message, exc)
            return False

        with self._lock:
            if ticket != self._issued:
                logger.debug('Dropping stale refresh of %s (ticket=%s)', d.name, ticket)
                return False
            self.items = list(rows or [])
        return True

    def filtered(self) -> FilteredItems:
        return FilteredItems(self.items, self.definition.search_fields, self.search_term)

    def set_search_term(self, term: str | None) -> None:
        self.search_term = term or ''

    def find(self, record_id: Any) -> dict | None:
        for record in self.items:
            if str(record.get('id')) == str(record_id):
                return record
        return None

    def load_choices(self) -> None:
        """Load pick-lists for relation fields (e.g. patient and doctor of an appointment)."""
        for relation in self.definition.relations:
            try:
                rows = self.data_service.list(
                    relation.table,
                    order_field=relation.order_field,
                    ascending=True,
                    select=relation.select_clause(),
                )
            except DataServiceError as exc:
                logger.warning('Could not load %s choices: %s', relation.table, exc)
                rows = []
            self.choices[relation.field] = [
                (row.get('id'), relation.label_for(row)) for row in rows or []
            ]

    # ------------------------------------------------------------------
    # Dialog
    # ------------------------------------------------------------------

    def open_create(self) -> None:
        self.form_fields = self.definition.defaults()
        self.editing_item = None
        self.errors = {}
        self.dialog_open = True

    def open_edit(self, record: dict) -> None:
        self.form_fields = self.definition.draft_from(record)
        self.editing_item = record
        self.errors = {}
        self.dialog_open = True

    def close(self) -> None:
        self.form_fields = self.definition.defaults()
        self.editing_item = None
        self.errors = {}
        self.dialog_open = False

    def update_form(self, values: dict[str, Any]) -> None:
        unknown = set(values) - set(self.form_fields)
        if unknown:
            raise KeyError(f"Unknown {self.definition.label} field(s): {', '.join(sorted(unknown))}")
        self.form_fields.update(values)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def _validated_payload(self) -> dict[str, Any]:
        serializer = self.definition.serializer_class(data=dict(self.form_fields))
        if not serializer.is_valid():
            errors = {name: [str(e) for e in errs] for name, errs in serializer.errors.items()}
            raise ValidationFailed(errors)
        return dict(serializer.validated_data)

    def submit(self) -> bool:
        """Insert or update the draft. Returns True on success.

        Calls made while a previous submit is still in flight are ignored.
        """
        with self._lock:
            if self._submitting:
                logger.info('Ignoring re-entrant submit for %s', self.definition.name)
                return False
            self._submitting = True

        d = self.definition
        editing = self.editing_item
        action = 'update' if editing is not None else d.create_verb
        try:
            try:
                payload = self._validated_payload()
            except ValidationFailed as exc:
                self.errors = exc.errors
                self.last_error = exc
                return False
            self.errors = {}

            try:
                if editing is not None:
                    saved = self.data_service.update(d.name, editing['id'], payload)
                    log_entity_action(d.name, 'updated', record_id=editing['id'])
                else:
                    user_id = self.current_user()
                    saved = self.data_service.insert(d.name, {**payload, 'created_by': user_id})
                    log_entity_action(d.name, 'created', record_id=(saved or {}).get('id'), user_id=user_id)
            except DataServiceError as exc:
                message = f'Failed to {action} {d.label}'
                self.last_error = WriteFailed(
                    message,
                    entity=d.name,
                    action=action,
                    record_id=editing['id'] if editing is not None else None,
                    status_code=exc.status_code,
                )
                self.notifications.error(message)
                logger.warning('%s: %s', message, exc)
                return False
        finally:
            with self._lock:
                self._submitting = False

        past = 'updated' if editing is not None else d.create_verb_past
        self.notifications.success(f'{d.label.capitalize()} {past} successfully')
        self.last_error = None
        self.last_saved = saved
        self.close()
        self.refresh()
        return True

    def remove(self, record_id: Any) -> bool:
        d = self.definition
        try:
            self.data_service.delete(d.name, record_id)
        except DataServiceError as exc:
            message = f'Failed to delete {d.label}'
            self.last_error = WriteFailed(
                message, entity=d.name, action='delete', record_id=record_id, status_code=exc.status_code,
            )
            self.notifications.error(message)
            logger.warning('%s %s: %s', message, record_id, exc)
            return False

        log_entity_action(d.name, 'deleted', record_id=record_id)
        self.notifications.success(f'{d.label.capitalize()} deleted successfully')
        self.last_error = None
        self.refresh()
        return True
