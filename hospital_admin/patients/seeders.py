import random
from datetime import date, timedelta

from hospital_admin.patients.entities import PATIENTS

FIRST_NAMES = ['Amelia', 'Noah', 'Olivia', 'Liam', 'Sofia', 'Elias', 'Mia', 'Jonas', 'Lena', 'Omar']
LAST_NAMES = ['Fischer', 'Khan', 'Novak', 'Silva', 'Meyer', 'Haddad', 'Brown', 'Rossi']


def seed_patients(data_service, user_id, count: int = 10) -> list[dict]:
    """Create ``count`` demo patients in the data service."""
    created = []
    for i in range(count):
        first = random.choice(FIRST_NAMES)
        last = random.choice(LAST_NAMES)
        birth = date(1950, 1, 1) + timedelta(days=random.randint(0, 365 * 60))
        created.append(data_service.insert(PATIENTS.name, {
            'full_name': f'{first} {last}',
            'date_of_birth': birth,
            'gender': random.choice(['male', 'female', 'other']),
            'phone': f'+49 30 {random.randint(1000000, 9999999)}',
            'email': f'{first.lower()}.{last.lower()}{i}@seed.local',
            'address': '',
            'medical_history': '',
            'created_by': user_id,
        }))
    return created
