from .clinical_data import ClinicalDataService, clinical_data_service
from .patients import PatientService, patient_service

__all__ = [
    'ClinicalDataService',
    'PatientService',
    'clinical_data_service',
    'patient_service',
]
