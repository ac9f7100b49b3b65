"""
Dashboard KPIs: number of records per entity.
"""

import logging

from hospital_admin.appointments.entities import APPOINTMENTS
from hospital_admin.core.exceptions import DataServiceError
from hospital_admin.doctors.entities import DOCTORS
from hospital_admin.patients.entities import PATIENTS

logger = logging.getLogger(__name__)

ENTITY_TABS = (PATIENTS, DOCTORS, APPOINTMENTS)


def get_entity_counts(data_service) -> dict[str, int]:
    """Count rows per entity; a failed count is shown as 0."""
    counts = {}
    for definition in ENTITY_TABS:
        try:
            counts[definition.name] = data_service.count_of(definition.name)
        except DataServiceError as exc:
            logger.warning('Counting %s failed: %s', definition.name, exc)
            counts[definition.name] = 0
    return counts
