import random
from decimal import Decimal

from hospital_admin.doctors.entities import DOCTORS

SPECIALIZATIONS = [
    ('Cardiologist', 'MD'),
    ('Pediatrician', 'MBBS, MD'),
    ('Dermatologist', 'MD'),
    ('Neurologist', 'MD, PhD'),
    ('General Practitioner', 'MBBS'),
]
NAMES = ['Dr. Weber', 'Dr. Patel', 'Dr. Kowalski', 'Dr. Moreau', 'Dr. Tanaka']


def seed_doctors(data_service, user_id) -> list[dict]:
    """Create one demo doctor per specialization."""
    created = []
    for name, (specialization, qualification) in zip(NAMES, SPECIALIZATIONS):
        slug = name.split()[-1].lower()
        created.append(data_service.insert(DOCTORS.name, {
            'full_name': name,
            'specialization': specialization,
            'phone': f'+49 30 {random.randint(1000000, 9999999)}',
            'email': f'{slug}@seed.local',
            'qualification': qualification,
            'experience_years': random.randint(1, 30),
            'consultation_fee': Decimal(random.choice(['50.00', '75.00', '120.00'])),
            'created_by': user_id,
        }))
    return created
