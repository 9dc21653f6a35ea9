"""
Persistence for patients and clinical data.

Services depend only on the small interface below (``list_all``, ``get``,
``exists``, ``save``, ``delete``, ``count_for_patient``) so a test can pass
in-memory fakes instead of these Django ORM implementations.
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from django.db import models

from .models import ClinicalData, Patient

M = TypeVar('M', bound=models.Model)


class DjangoRepository(Generic[M]):
    model: type[M]

    def get_queryset(self):
        return self.model.objects.all()

    def list_all(self) -> list[M]:
        return list(self.get_queryset())

    def get(self, pk: int) -> Optional[M]:
        return self.get_queryset().filter(pk=pk).first()

    def exists(self, pk: int) -> bool:
        return self.model.objects.filter(pk=pk).exists()

    def save(self, obj: M) -> M:
        obj.save()
        return obj

    def delete(self, pk: int) -> None:
        self.model.objects.filter(pk=pk).delete()


class PatientRepository(DjangoRepository[Patient]):
    model = Patient

    def get_queryset(self):
        return Patient.objects.prefetch_related('clinical_data')


class ClinicalDataRepository(DjangoRepository[ClinicalData]):
    model = ClinicalData

    def count_for_patient(self, patient_id: int) -> int:
        return ClinicalData.objects.filter(patient_id=patient_id).count()
