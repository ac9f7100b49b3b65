"""
Seed command: creates demo data in the data service.

Usage:
    python manage.py seed --email admin@example.com --password secret

Records are created with the signed-in user as ``created_by``.
Existing data is left untouched.
"""

import random

from django.core.management.base import BaseCommand, CommandError

from hospital_admin.appointments.seeders import seed_appointments
from hospital_admin.core.data_service import get_data_service
from hospital_admin.core.exceptions import DataServiceError
from hospital_admin.doctors.seeders import seed_doctors
from hospital_admin.patients.seeders import seed_patients

RANDOM_SEED = 42


class Command(BaseCommand):
    help = "Seed the data service with demo patients, doctors and appointments"

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True, help="Data service account used as created_by")
        parser.add_argument("--password", required=True)
        parser.add_argument("--patients", type=int, default=10)
        parser.add_argument("--appointments", type=int, default=20)

    def handle(self, *args, **options):
        random.seed(RANDOM_SEED)
        data_service = get_data_service()

        self.stdout.write("=" * 60)
        self.stdout.write("  Hospital Admin Seed - generating demo data")
        self.stdout.write("=" * 60)

        try:
            data_service.sign_in(options["email"], options["password"])
            user_id = data_service.current_user_id()

            self.stdout.write("\n[1/3] Seeding patients...")
            patients = seed_patients(data_service, user_id, count=options["patients"])

            self.stdout.write("[2/3] Seeding doctors...")
            doctors = seed_doctors(data_service, user_id)

            self.stdout.write("[3/3] Seeding appointments...")
            appointments = seed_appointments(
                data_service, user_id, patients, doctors, count=options["appointments"],
            )
        except DataServiceError as exc:
            raise CommandError(f"Seeding failed: {exc}") from exc

        self._print_summary({
            "patients": len(patients),
            "doctors": len(doctors),
            "appointments": len(appointments),
        })

    def _print_summary(self, stats):
        self.stdout.write("\nCreated records:")
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  • {key}: {value}")
