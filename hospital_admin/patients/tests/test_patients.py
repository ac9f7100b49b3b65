from __future__ import annotations

from unittest.mock import patch

from django.test import SimpleTestCase
from rest_framework.test import APIClient

from hospital_admin.core.exceptions import DataServiceError
from hospital_admin.core.tests.helpers import mock_data_service


PATIENTS = [
    {
        "id": "p-1",
        "full_name": "Max Mustermann",
        "date_of_birth": "1990-05-15",
        "gender": "male",
        "phone": "+49 30 1234567",
        "email": "max@example.com",
        "address": None,
        "medical_history": None,
    },
    {
        "id": "p-2",
        "full_name": "Erika Musterfrau",
        "date_of_birth": "1985-03-20",
        "gender": "female",
        "phone": "+49 89 7654321",
        "email": None,
        "address": "Marienplatz 1",
        "medical_history": "",
    },
]


class PatientAPITest(SimpleTestCase):
    """Tests for /api/patients/ endpoints.

    The data service is replaced by a mock; requests authenticate with a
    bearer token that is passed on to the data service.
    """

    def setUp(self):
        self.service = mock_data_service(PATIENTS)
        patcher = patch("hospital_admin.core.context.get_data_service", return_value=self.service)
        self.mock_factory = patcher.start()
        self.addCleanup(patcher.stop)

        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION="Bearer token-123")

    # ========== LIST TESTS ==========

    def test_list_returns_patients(self):
        response = self.client.get("/api/patients/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.json()], ["p-1", "p-2"])
        self.mock_factory.assert_called_once_with("token-123")

    def test_list_search_filters_by_name_phone_email(self):
        response = self.client.get("/api/patients/", {"search": "erika"})
        self.assertEqual([p["id"] for p in response.json()], ["p-2"])

        response = self.client.get("/api/patients/", {"search": "30 123"})
        self.assertEqual([p["id"] for p in response.json()], ["p-1"])

        response = self.client.get("/api/patients/", {"search": "MAX@"})
        self.assertEqual([p["id"] for p in response.json()], ["p-1"])

    def test_list_failure_returns_502(self):
        self.service.list.side_effect = DataServiceError("down", status_code=503)

        response = self.client.get("/api/patients/")

        self.assertEqual(response.status_code, 502)
        body = response.json()
        self.assertEqual(body["code"], "fetch_failed")
        self.assertEqual(body["notifications"][0]["message"], "Failed to fetch patients")

    def test_list_with_expired_token_returns_401(self):
        self.service.list.side_effect = DataServiceError("JWT expired", status_code=401)

        response = self.client.get("/api/patients/")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response["WWW-Authenticate"], "Bearer")

    def test_list_unauthenticated(self):
        response = APIClient().get("/api/patients/")

        self.assertEqual(response.status_code, 401)
        self.mock_factory.assert_not_called()

    # ========== CREATE TESTS ==========

    def test_create_patient(self):
        data = {
            "full_name": "Hans Schmidt",
            "date_of_birth": "1975-07-10",
            "gender": "male",
            "phone": "+49 40 111",
            "id": "ignored",
        }

        response = self.client.post("/api/patients/", data, format="json")

        self.assertEqual(response.status_code, 201)
        self.service.insert.assert_called_once()
        entity, payload = self.service.insert.call_args[0]
        self.assertEqual(entity, "patients")
        self.assertEqual(payload["created_by"], "user-1")
        self.assertNotIn("id", payload)
        self.assertEqual(response.json()["notifications"][0]["message"], "Patient added successfully")

    def test_create_missing_fields_returns_400(self):
        response = self.client.post("/api/patients/", {"full_name": "Hans"}, format="json")

        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["code"], "validation_failed")
        self.assertIn("date_of_birth", body["errors"])
        self.assertIn("phone", body["errors"])
        self.service.insert.assert_not_called()

    def test_create_failure_returns_502(self):
        self.service.insert.side_effect = DataServiceError("rls", status_code=403)
        data = {"full_name": "Hans", "date_of_birth": "1975-07-10", "gender": "male", "phone": "1"}

        response = self.client.post("/api/patients/", data, format="json")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["detail"], "Failed to add patient")

    # ========== UPDATE / DELETE TESTS ==========

    def test_update_patient(self):
        response = self.client.put("/api/patients/p-2/", {"phone": "+49 89 000"}, format="json")

        self.assertEqual(response.status_code, 200)
        entity, record_id, payload = self.service.update.call_args[0]
        self.assertEqual((entity, record_id), ("patients", "p-2"))
        self.assertEqual(payload["phone"], "+49 89 000")
        self.assertEqual(payload["full_name"], "Erika Musterfrau")
        self.assertEqual(payload["email"], "")
        self.service.insert.assert_not_called()

    def test_update_unknown_patient_returns_404(self):
        response = self.client.put("/api/patients/p-404/", {"phone": "1"}, format="json")

        self.assertEqual(response.status_code, 404)
        self.service.update.assert_not_called()

    def test_delete_patient(self):
        response = self.client.delete("/api/patients/p-1/")

        self.assertEqual(response.status_code, 204)
        self.service.delete.assert_called_once_with("patients", "p-1")

    def test_delete_referenced_patient_fails(self):
        self.service.delete.side_effect = DataServiceError("violates foreign key", status_code=409)

        response = self.client.delete("/api/patients/p-1/")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["detail"], "Failed to delete patient")
