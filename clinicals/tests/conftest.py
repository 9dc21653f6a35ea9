import pytest
from rest_framework.test import APIClient

from clinicals.models import Patient


class InMemoryRepository:
    """Dict-backed stand-in for the ORM repositories."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1

    def list_all(self):
        return [self.rows[pk] for pk in sorted(self.rows)]

    def get(self, pk):
        return self.rows.get(pk)

    def exists(self, pk):
        return pk in self.rows

    def save(self, obj):
        if obj.pk is None:
            obj.pk = self._next_id
            self._next_id += 1
        self.rows[obj.pk] = obj
        return obj

    def delete(self, pk):
        self.rows.pop(pk, None)


class InMemoryClinicalDataRepository(InMemoryRepository):
    def count_for_patient(self, patient_id):
        return sum(1 for r in self.rows.values() if r.patient_id == patient_id)


@pytest.fixture
def patient_repo():
    return InMemoryRepository()


@pytest.fixture
def clinical_data_repo():
    return InMemoryClinicalDataRepository()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def patient(db):
    return Patient.objects.create(first_name='Alice', last_name='Johnson', age=28)
