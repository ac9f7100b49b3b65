"""Entity declarations for the generic controller.

An ``EntityDefinition`` tells an ``EntityController`` everything it needs to
know about one table: where it lives in the data service, which serializer
describes its editable fields, how to sort and search it, and which related
rows are joined in for display.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rest_framework import serializers


class EntitySerializer(serializers.Serializer):
    """Write serializer for a controller's form draft.

    Field declarations are the entity schema: ``required``, the field type
    and ``initial`` (the default shown in a fresh form). Blank input for a
    nullable field becomes ``None``.
    """

    def to_internal_value(self, data):
        if not isinstance(data, Mapping):
            return super().to_internal_value(data)
        data = dict(data)
        for name, schema_field in self.fields.items():
            if schema_field.allow_null and data.get(name) == '':
                data[name] = None
        return super().to_internal_value(data)


@dataclass(frozen=True)
class JoinSpec:
    """Read-only projection of a related table, e.g. ``patients(full_name)``."""

    table: str
    columns: tuple[str, ...]

    def select_clause(self) -> str:
        return f"{self.table}({','.join(self.columns)})"


@dataclass(frozen=True)
class RelationSpec:
    """Pick-list source for a foreign key field of the form."""

    field: str
    table: str
    label_columns: tuple[str, ...] = ('full_name',)
    order_field: str = 'full_name'

    def select_clause(self) -> str:
        return ','.join(('id',) + self.label_columns)

    def label_for(self, row: dict) -> str:
        parts = [str(row[c]) for c in self.label_columns if row.get(c)]
        return ' - '.join(parts)


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    label: str
    label_plural: str
    serializer_class: type[EntitySerializer]
    search_fields: tuple[str, ...]
    order_field: str = 'created_at'
    ascending: bool = False
    joins: tuple[JoinSpec, ...] = ()
    relations: tuple[RelationSpec, ...] = ()
    create_verb: str = 'add'
    create_verb_past: str = 'added'
    list_columns: tuple[tuple[str, str], ...] = ()

    def select_clause(self) -> str:
        return ','.join(['*'] + [join.select_clause() for join in self.joins])

    def schema(self) -> EntitySerializer:
        return self.serializer_class()

    def field_names(self) -> list[str]:
        return list(self.schema().fields.keys())

    def defaults(self) -> dict[str, Any]:
        """Fresh form draft: every field at its ``initial`` value, else blank."""
        draft = {}
        for name, schema_field in self.schema().fields.items():
            initial = schema_field.get_initial()
            draft[name] = '' if initial is None else initial
        return draft

    def draft_from(self, record: dict) -> dict[str, Any]:
        """Form draft mirroring ``record``; missing or null values become blank."""
        draft = {}
        for name in self.field_names():
            value = record.get(name)
            draft[name] = '' if value is None else value
        return draft


def lookup(record: dict, path: str) -> Any:
    """Resolve a dotted path (``doctors.full_name``) inside a record."""
    value: Any = record
    for part in path.split('.'):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value
