from __future__ import annotations

from unittest.mock import patch

from django.conf import settings
from django.test import SimpleTestCase
from rest_framework.test import APIClient

from hospital_admin.core.exceptions import DataServiceError
from hospital_admin.core.tests.helpers import mock_data_service, sign_in_client


ROWS = {
    "patients": [
        {"id": "p-1", "full_name": "Max Mustermann", "date_of_birth": "1990-05-15", "gender": "male",
         "phone": "+49 30 1234567", "email": "max@example.com", "address": None, "medical_history": None},
        {"id": "p-2", "full_name": "Erika Musterfrau", "date_of_birth": "1985-03-20", "gender": "female",
         "phone": "+49 89 7654321", "email": None, "address": None, "medical_history": None},
    ],
    "doctors": [
        {"id": "d-1", "full_name": "Dr. Weber", "specialization": "Cardiologist", "phone": "1",
         "email": "weber@example.com", "qualification": "MD", "experience_years": 12, "consultation_fee": None},
    ],
    "appointments": [
        {"id": "a-1", "patient_id": "p-1", "doctor_id": "d-1", "appointment_date": "2024-06-02",
         "appointment_time": "09:30:00", "status": "cancelled", "reason": None, "notes": None,
         "patients": {"full_name": "Max Mustermann"},
         "doctors": {"full_name": "Dr. Weber", "specialization": "Cardiologist"}},
    ],
}

COUNTS = {"patients": 2, "doctors": 1, "appointments": 1}


class DashboardViewTestBase(SimpleTestCase):
    """Server-rendered dashboard tabs; the data service is mocked."""

    def setUp(self):
        self.service = mock_data_service()
        self.service.list.side_effect = lambda entity, **kwargs: list(ROWS[entity])
        self.service.count_of.side_effect = lambda entity: COUNTS[entity]
        patcher = patch("hospital_admin.core.context.get_data_service", return_value=self.service)
        patcher.start()
        self.addCleanup(patcher.stop)
        sign_in_client(self.client)


class DashboardAccessTest(SimpleTestCase):
    def test_dashboard_requires_session(self):
        r = self.client.get("/dashboard/")
        self.assertRedirects(r, "/", fetch_redirect_response=False)

    def test_write_requires_session(self):
        r = self.client.post("/dashboard/patients/p-1/delete/")
        self.assertRedirects(r, "/", fetch_redirect_response=False)


class DashboardTabsTest(DashboardViewTestBase):
    def test_index_shows_counts_and_patients_tab(self):
        r = self.client.get("/dashboard/")

        self.assertEqual(r.status_code, 200)
        html = r.content.decode("utf-8")
        self.assertIn("Total Patients", html)
        self.assertIn("Max Mustermann", html)
        self.assertIn("Patient Management", html)
        self.assertEqual(
            [card["value"] for card in r.context["kpi_cards"]],
            [2, 1, 1],
        )

    def test_failed_count_shows_zero(self):
        self.service.count_of.side_effect = DataServiceError("down")

        r = self.client.get("/dashboard/doctors/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual([card["value"] for card in r.context["kpi_cards"]], [0, 0, 0])

    def test_search_filters_rows(self):
        r = self.client.get("/dashboard/patients/", {"q": "erika"})

        html = r.content.decode("utf-8")
        self.assertIn("Erika Musterfrau", html)
        self.assertNotIn("Max Mustermann", html)

    def test_empty_search_result(self):
        r = self.client.get("/dashboard/doctors/", {"q": "zzz"})
        self.assertIn("No doctors found", r.content.decode("utf-8"))

    def test_appointments_tab_shows_joined_names(self):
        r = self.client.get("/dashboard/appointments/")

        html = r.content.decode("utf-8")
        self.assertIn("Dr. Weber", html)
        self.assertIn("badge-destructive", html)

    def test_fetch_failure_shows_notification(self):
        self.service.list.side_effect = DataServiceError("down")

        r = self.client.get("/dashboard/patients/")

        self.assertEqual(r.status_code, 200)
        self.assertIn("Failed to fetch patients", r.content.decode("utf-8"))


class DashboardDialogTest(DashboardViewTestBase):
    def test_new_opens_create_dialog_with_defaults(self):
        r = self.client.get("/dashboard/patients/new/")

        controller = r.context["controller"]
        self.assertTrue(controller.dialog_open)
        self.assertIsNone(controller.editing_item)
        self.assertIn("Add New Patient", r.content.decode("utf-8"))

    def test_edit_opens_dialog_with_record(self):
        r = self.client.get("/dashboard/patients/p-2/edit/")

        controller = r.context["controller"]
        self.assertEqual(controller.editing_item["id"], "p-2")
        self.assertEqual(controller.form_fields["email"], "")

    def test_edit_unknown_record_404(self):
        r = self.client.get("/dashboard/patients/p-404/edit/")
        self.assertEqual(r.status_code, 404)

    def test_appointment_dialog_offers_patient_and_doctor_choices(self):
        r = self.client.get("/dashboard/appointments/new/")

        html = r.content.decode("utf-8")
        self.assertIn("Book New Appointment", html)
        self.assertIn('<option value="d-1">Dr. Weber - Cardiologist</option>', html)
        self.assertIn('<option value="p-2">Erika Musterfrau</option>', html)


class DashboardWriteTest(DashboardViewTestBase):
    def test_create_redirects_back_to_tab(self):
        r = self.client.post("/dashboard/doctors/", {
            "full_name": "Dr. Patel",
            "specialization": "Pediatrician",
            "phone": "2",
            "email": "patel@example.com",
            "qualification": "MBBS",
            "experience_years": "5",
            "consultation_fee": "",
        })

        self.assertRedirects(r, "/dashboard/doctors/", fetch_redirect_response=False)
        payload = self.service.insert.call_args[0][1]
        self.assertEqual(payload["experience_years"], 5)
        self.assertIsNone(payload["consultation_fee"])

    def test_invalid_create_keeps_dialog_open(self):
        r = self.client.post("/dashboard/patients/new/", {"full_name": "Hans", "gender": "male"})

        self.assertEqual(r.status_code, 400)
        controller = r.context["controller"]
        self.assertTrue(controller.dialog_open)
        self.assertEqual(controller.form_fields["full_name"], "Hans")
        self.assertIn("phone", controller.errors)
        self.service.insert.assert_not_called()

    def test_failed_create_keeps_draft(self):
        self.service.insert.side_effect = DataServiceError("rls", status_code=403)

        r = self.client.post("/dashboard/appointments/new/", {
            "patient_id": "p-1",
            "doctor_id": "d-1",
            "appointment_date": "2024-07-01",
            "appointment_time": "10:00",
            "status": "scheduled",
        })

        self.assertEqual(r.status_code, 200)
        controller = r.context["controller"]
        self.assertTrue(controller.dialog_open)
        self.assertEqual(controller.form_fields["appointment_time"], "10:00")
        self.assertIn("Failed to book appointment", r.content.decode("utf-8"))

    def test_edit_submits_update(self):
        r = self.client.post("/dashboard/patients/p-1/edit/", {
            "full_name": "Max Mustermann",
            "date_of_birth": "1990-05-15",
            "gender": "male",
            "phone": "+49 30 0000",
            "email": "",
            "address": "",
            "medical_history": "",
        })

        self.assertRedirects(r, "/dashboard/patients/", fetch_redirect_response=False)
        self.service.update.assert_called_once()
        self.assertEqual(self.service.update.call_args[0][1], "p-1")
        self.service.insert.assert_not_called()

    def test_delete_redirects_with_message(self):
        r = self.client.post("/dashboard/patients/p-1/delete/", follow=True)

        self.service.delete.assert_called_once_with("patients", "p-1")
        self.assertIn("Patient deleted successfully", r.content.decode("utf-8"))

    def test_search_term_kept_after_write(self):
        r = self.client.post("/dashboard/patients/p-1/delete/?q=max")
        self.assertRedirects(r, "/dashboard/patients/?q=max", fetch_redirect_response=False)


class SessionExpiryTest(DashboardViewTestBase):
    def test_rejected_token_signs_out_and_redirects(self):
        self.service.list.side_effect = DataServiceError("JWT expired", status_code=401)

        r = self.client.get("/dashboard/patients/")

        self.assertRedirects(r, "/", fetch_redirect_response=False)
        self.assertNotIn(settings.DATA_SERVICE_SESSION_KEY, self.client.session)

    def test_landing_page_explains_expiry(self):
        self.service.list.side_effect = DataServiceError("JWT expired", status_code=401)

        r = self.client.get("/dashboard/patients/", follow=True)

        html = r.content.decode("utf-8")
        self.assertIn("Your session has expired", html)
        self.assertNotIn("Failed to fetch patients", html)

    def test_rejected_delete_redirects_to_landing(self):
        self.service.delete.side_effect = DataServiceError("JWT expired", status_code=401)

        r = self.client.post("/dashboard/patients/p-1/delete/")

        self.assertRedirects(r, "/", fetch_redirect_response=False)

    def test_other_failures_stay_on_tab(self):
        self.service.list.side_effect = DataServiceError("down", status_code=503)

        r = self.client.get("/dashboard/patients/")

        self.assertEqual(r.status_code, 200)
        self.assertIn(settings.DATA_SERVICE_SESSION_KEY, self.client.session)


class StatsAPITest(SimpleTestCase):
    @patch("hospital_admin.core.context.get_data_service")
    def test_stats_returns_counts(self, mock_factory):
        service = mock_data_service()
        service.count_of.side_effect = lambda entity: COUNTS[entity]
        mock_factory.return_value = service
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION="Bearer token-123")

        response = client.get("/api/stats/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), COUNTS)
