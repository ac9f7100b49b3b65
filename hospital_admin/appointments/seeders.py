import random
from datetime import date, time, timedelta

from hospital_admin.appointments.entities import APPOINTMENTS

REASONS = ['Checkup', 'Follow-up', 'Vaccination', 'Lab results', 'Consultation']


def seed_appointments(data_service, user_id, patients, doctors, count: int = 20) -> list[dict]:
    """Spread ``count`` appointments randomly over the seeded patients and doctors."""
    if not patients or not doctors:
        return []

    today = date.today()
    created = []
    for _ in range(count):
        offset = random.randint(-14, 28)
        created.append(data_service.insert(APPOINTMENTS.name, {
            'patient_id': random.choice(patients)['id'],
            'doctor_id': random.choice(doctors)['id'],
            'appointment_date': today + timedelta(days=offset),
            'appointment_time': time(random.randint(8, 17), random.choice([0, 15, 30, 45])),
            'status': 'completed' if offset < 0 else 'scheduled',
            'reason': random.choice(REASONS),
            'notes': '',
            'created_by': user_id,
        }))
    return created
