"""
Dashboard Widgets

Turns controller state into plain dicts for the templates: KPI cards,
tab navigation, table rows and dialog form fields.
"""

from django.urls import reverse
from rest_framework import serializers

from hospital_admin.core.schema import lookup


KPI_CARDS = {
    'patients': ('Total Patients', 'Registered patients'),
    'doctors': ('Total Doctors', 'Medical professionals'),
    'appointments': ('Total Appointments', 'Scheduled appointments'),
}

STATUS_BADGES = {
    'scheduled': 'default',
    'completed': 'secondary',
    'cancelled': 'destructive',
}


def build_kpi_cards(counts):
    """KPI cards for the dashboard header."""
    cards = []
    for name, (title, subtitle) in KPI_CARDS.items():
        cards.append({
            'id': name,
            'title': title,
            'value': counts.get(name, 0),
            'subtitle': subtitle,
        })
    return cards


def build_tabs(definitions, active):
    return [
        {
            'name': d.name,
            'title': d.label_plural.capitalize(),
            'url': reverse(f'dashboard:{d.name}'),
            'active': d.name == active.name,
        }
        for d in definitions
    ]


def build_rows(controller):
    """Table rows for the filtered items, with edit/delete URLs."""
    d = controller.definition
    rows = []
    for record in controller.filtered():
        record_id = record.get('id')
        rows.append({
            'id': record_id,
            'cells': [lookup(record, path) for _, path in d.list_columns],
            'status_badge': STATUS_BADGES.get(record.get('status')),
            'edit_url': reverse(f'dashboard:{d.name}_edit', args=[record_id]),
            'delete_url': reverse(f'dashboard:{d.name}_delete', args=[record_id]),
        })
    return rows


def _input_type(name, schema_field, controller):
    if name in controller.choices or isinstance(schema_field, serializers.ChoiceField):
        return 'select'
    if isinstance(schema_field, serializers.EmailField):
        return 'email'
    if isinstance(schema_field, serializers.DateField):
        return 'date'
    if isinstance(schema_field, serializers.TimeField):
        return 'time'
    if isinstance(schema_field, (serializers.IntegerField, serializers.DecimalField)):
        return 'number'
    if isinstance(schema_field, serializers.CharField) and schema_field.max_length is None:
        return 'textarea'
    return 'text'


def build_form_fields(controller):
    """Dialog inputs mirroring the controller's draft and inline errors."""
    fields = []
    for name, schema_field in controller.definition.schema().fields.items():
        input_type = _input_type(name, schema_field, controller)
        if name in controller.choices:
            choices = controller.choices[name]
        elif isinstance(schema_field, serializers.ChoiceField):
            choices = list(schema_field.choices.items())
        else:
            choices = []
        fields.append({
            'name': name,
            'label': name.replace('_', ' ').capitalize(),
            'value': str(controller.form_fields.get(name, '')),
            'required': schema_field.required,
            'input_type': input_type,
            'choices': [(str(value), label) for value, label in choices],
            'step': '0.01' if isinstance(schema_field, serializers.DecimalField) else None,
            'errors': controller.errors.get(name, []),
        })
    return fields
