"""Clinical data use cases.

Besides plain CRUD, measurements can be recorded for a patient from the
``{patientId, componentName, componentValue}`` shape, in which case the
measurement time is assigned by the server.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

import structlog
from django.utils import timezone

from clinicals.exceptions import NotFound
from clinicals.models import ClinicalData, Patient
from clinicals.repositories import ClinicalDataRepository, PatientRepository
from clinicals.validators import (
    validate_clinical_data,
    validate_clinical_data_dto,
    validate_id,
    validate_patient_reference,
)

logger = structlog.get_logger(__name__)


class ClinicalDataService:
    def __init__(self, clinical_data=None, patients=None):
        self.clinical_data = ClinicalDataRepository() if clinical_data is None else clinical_data
        self.patients = PatientRepository() if patients is None else patients

    def _resolve_patient(self, patient_id: int) -> Patient:
        patient = self.patients.get(patient_id)
        if patient is None:
            raise NotFound(f'Patient not found with ID: {patient_id}')
        return patient

    def list_all(self) -> list[ClinicalData]:
        return self.clinical_data.list_all()

    def get_by_id(self, record_id: Optional[int]) -> ClinicalData:
        validate_id(record_id, 'Clinical Data')
        record = self.clinical_data.get(record_id)
        if record is None:
            raise NotFound(f'Clinical data not found with ID: {record_id}')
        return record

    def create(self, data: Optional[Mapping[str, Any]]) -> ClinicalData:
        validate_clinical_data(data)
        validate_patient_reference(data.get('patient_id'))
        patient = self._resolve_patient(data['patient_id'])
        record = self.clinical_data.save(ClinicalData(
            component_name=data['component_name'],
            component_value=data['component_value'],
            measured_date_time=data['measured_date_time'],
            patient=patient,
        ))
        logger.info('clinical_data_created', clinical_data_id=record.id, patient_id=patient.id)
        return record

    def update(self, record_id: Optional[int], details: Optional[Mapping[str, Any]]) -> ClinicalData:
        """Replace name, value and measurement time; the patient stays as is."""
        validate_id(record_id, 'Clinical Data')
        validate_clinical_data(details)
        record = self.get_by_id(record_id)
        record.component_name = details['component_name']
        record.component_value = details['component_value']
        record.measured_date_time = details['measured_date_time']
        record = self.clinical_data.save(record)
        logger.info('clinical_data_updated', clinical_data_id=record.id)
        return record

    def delete(self, record_id: Optional[int]) -> None:
        validate_id(record_id, 'Clinical Data')
        if not self.clinical_data.exists(record_id):
            raise NotFound(f'Clinical data not found with ID: {record_id}')
        self.clinical_data.delete(record_id)
        logger.info('clinical_data_deleted', clinical_data_id=record_id)

    def create_for_patient(self, dto: Optional[Mapping[str, Any]]) -> ClinicalData:
        validate_clinical_data_dto(dto)
        patient = self._resolve_patient(dto['patient_id'])
        record = self.clinical_data.save(ClinicalData(
            component_name=dto['component_name'],
            component_value=dto['component_value'],
            measured_date_time=timezone.now(),
            patient=patient,
        ))
        logger.info('clinical_data_created', clinical_data_id=record.id, patient_id=patient.id)
        return record


clinical_data_service = ClinicalDataService()
