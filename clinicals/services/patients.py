"""Patient use cases: list, fetch, create, replace and delete."""
from __future__ import annotations

from typing import Any, Mapping, Optional

import structlog

from clinicals.exceptions import NotFound
from clinicals.models import Patient
from clinicals.repositories import ClinicalDataRepository, PatientRepository
from clinicals.validators import validate_id, validate_patient

logger = structlog.get_logger(__name__)


class PatientService:
    def __init__(self, patients=None, clinical_data=None):
        self.patients = PatientRepository() if patients is None else patients
        self.clinical_data = ClinicalDataRepository() if clinical_data is None else clinical_data

    def list_all(self) -> list[Patient]:
        return self.patients.list_all()

    def get_by_id(self, patient_id: Optional[int]) -> Patient:
        validate_id(patient_id, 'Patient')
        patient = self.patients.get(patient_id)
        if patient is None:
            raise NotFound(f'Patient not found with ID: {patient_id}')
        return patient

    def create(self, data: Optional[Mapping[str, Any]]) -> Patient:
        validate_patient(data)
        patient = self.patients.save(Patient(
            first_name=data['first_name'],
            last_name=data['last_name'],
            age=data['age'],
        ))
        logger.info('patient_created', patient_id=patient.id)
        return patient

    def update(self, patient_id: Optional[int], details: Optional[Mapping[str, Any]]) -> Patient:
        """Replace every editable field of an existing patient.

        There is no partial update: a field left out of ``details`` fails
        validation instead of keeping its stored value.
        """
        validate_id(patient_id, 'Patient')
        validate_patient(details)
        patient = self.get_by_id(patient_id)
        patient.first_name = details['first_name']
        patient.last_name = details['last_name']
        patient.age = details['age']
        patient = self.patients.save(patient)
        logger.info('patient_updated', patient_id=patient.id)
        return patient

    def delete(self, patient_id: Optional[int]) -> None:
        validate_id(patient_id, 'Patient')
        if not self.patients.exists(patient_id):
            raise NotFound(f'Patient not found with ID: {patient_id}')
        # Measurements are not removed with their patient
        orphaned = self.clinical_data.count_for_patient(patient_id)
        self.patients.delete(patient_id)
        if orphaned:
            logger.warning('patient_deleted_with_orphans', patient_id=patient_id, clinical_data_rows=orphaned)
        else:
            logger.info('patient_deleted', patient_id=patient_id)


patient_service = PatientService()
