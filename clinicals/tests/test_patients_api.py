"""
Integration tests for the patient endpoints.

These exercise the full stack (routing, decoding, validation, the ORM and
error rendering) through DRF's APIClient within APITestCase.
"""

from rest_framework import status
from rest_framework.test import APITestCase

from clinicals.models import ClinicalData, Patient


class PatientAPITests(APITestCase):
    def setUp(self) -> None:
        self.alice = Patient.objects.create(first_name="Alice", last_name="Johnson", age=28)
        self.bob = Patient.objects.create(first_name="Bob", last_name="Smith", age=45)

    def test_list_patients(self):
        response = self.client.get("/patients")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in response.data], [self.alice.id, self.bob.id])
        self.assertEqual(response.data[0]["clinicalData"], [])

    def test_create_patient_returns_id_and_fields(self):
        payload = {"firstName": "Carmen", "lastName": "Garcia", "age": 33}
        response = self.client.post("/patients", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn("id", response.data)
        for key, value in payload.items():
            self.assertEqual(response.data[key], value)
        self.assertTrue(Patient.objects.filter(id=response.data["id"], first_name="Carmen").exists())

    def test_round_trip(self):
        payload = {"firstName": "Dev", "lastName": "Patel", "age": 150}
        created = self.client.post("/patients", payload, format="json").data
        response = self.client.get(f"/patients/{created['id']}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            {k: response.data[k] for k in ("id", "firstName", "lastName", "age")},
            {"id": created["id"], **payload},
        )

    def test_client_supplied_id_is_ignored(self):
        response = self.client.post(
            "/patients", {"id": self.alice.id, "firstName": "Eve", "lastName": "Novak", "age": 50}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(response.data["id"], self.alice.id)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.first_name, "Alice")

    def test_invalid_patients_are_rejected_without_saving(self):
        cases = [
            {"lastName": "Johnson", "age": 28},
            {"firstName": "", "lastName": "Johnson", "age": 28},
            {"firstName": "   ", "lastName": "Johnson", "age": 28},
            {"firstName": "Alice", "age": 28},
            {"firstName": "Alice", "lastName": "x" * 101, "age": 28},
            {"firstName": "Alice", "lastName": "Johnson"},
            {"firstName": "Alice", "lastName": "Johnson", "age": 0},
            {"firstName": "Alice", "lastName": "Johnson", "age": 151},
            {"firstName": "Alice", "lastName": "Johnson", "age": "old"},
        ]
        for payload in cases:
            with self.subTest(payload=payload):
                response = self.client.post("/patients", payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "Bad Request")
                self.assertTrue(response.data["message"])
        self.assertEqual(Patient.objects.count(), 2)

    def test_error_messages(self):
        response = self.client.post("/patients", {"firstName": "Alice", "lastName": "Johnson", "age": 151}, format="json")
        self.assertEqual(response.data, {"error": "Bad Request", "message": "Age must not exceed 150"})
        response = self.client.post("/patients", {"firstName": "Alice", "lastName": "Johnson", "age": "old"}, format="json")
        self.assertTrue(response.data["message"].startswith("age: "))

    def test_null_body_is_rejected(self):
        response = self.client.generic("POST", "/patients", "null", content_type="application/json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Patient cannot be null")

    def test_malformed_json_is_rejected(self):
        response = self.client.generic("POST", "/patients", "{not json", content_type="application/json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Bad Request")

    def test_get_missing_patient(self):
        response = self.client.get("/patients/999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Not Found", "message": "Patient not found with ID: 999"})

    def test_non_positive_ids_are_bad_requests(self):
        for path in ("/patients/0", "/patients/-3"):
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(self.client.delete(path).status_code, status.HTTP_400_BAD_REQUEST)
                response = self.client.put(path, {"firstName": "A", "lastName": "B", "age": 3}, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["message"], "Patient ID must be a positive number")

    def test_update_patient(self):
        payload = {"firstName": "Alicia", "lastName": "Jones", "age": 29}
        response = self.client.put(f"/patients/{self.alice.id}", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["firstName"], "Alicia")
        self.alice.refresh_from_db()
        self.assertEqual((self.alice.first_name, self.alice.last_name, self.alice.age), ("Alicia", "Jones", 29))

    def test_update_requires_every_field(self):
        response = self.client.put(f"/patients/{self.alice.id}", {"firstName": "Alicia"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.first_name, "Alice")

    def test_update_missing_patient(self):
        response = self.client.put("/patients/999", {"firstName": "A", "lastName": "B", "age": 3}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_is_not_repeatable(self):
        first = self.client.delete(f"/patients/{self.bob.id}")
        self.assertEqual(first.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(first.content, b"")
        second = self.client.delete(f"/patients/{self.bob.id}")
        self.assertEqual(second.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.get(f"/patients/{self.bob.id}").status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_leaves_clinical_data(self):
        record = ClinicalData.objects.create(patient=self.alice, component_name="Heart Rate", component_value="72")
        response = self.client.delete(f"/patients/{self.alice.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Patient.objects.filter(id=self.alice.id).exists())
        orphan = self.client.get(f"/clinicaldata/{record.id}")
        self.assertEqual(orphan.status_code, status.HTTP_200_OK)
        self.assertEqual(orphan.data["patientId"], self.alice.id)

    def test_patient_lists_its_clinical_data(self):
        ClinicalData.objects.create(patient=self.alice, component_name="Heart Rate", component_value="72")
        ClinicalData.objects.create(patient=self.bob, component_name="Weight", component_value="80")
        response = self.client.get(f"/patients/{self.alice.id}")
        self.assertEqual([c["componentName"] for c in response.data["clinicalData"]], ["Heart Rate"])

    def test_patch_is_not_supported(self):
        response = self.client.patch(f"/patients/{self.alice.id}", {"age": 30}, format="json")
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data["error"], "Method Not Allowed")
