"""
Field rules checked before anything is persisted.

Each validator takes a plain mapping (as decoded by the request
serializers, or built by hand in tests) using the snake_case field names,
and raises :class:`~clinicals.exceptions.ValidationError` on the first
rule that fails.  Nothing here touches the database.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .exceptions import InvalidArgument, ValidationError

NAME_MAX_LENGTH = 100
# Matches the clinicaldata column widths
COMPONENT_MAX_LENGTH = 255
AGE_MIN = 1
AGE_MAX = 150


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _validate_name(value: Any, label: str) -> None:
    if _is_blank(value):
        raise ValidationError(f'{label} is required and cannot be empty')
    if len(value) > NAME_MAX_LENGTH:
        raise ValidationError(f'{label} must be between 1 and {NAME_MAX_LENGTH} characters')


def validate_id(value: Optional[int], label: str) -> int:
    """Return ``value`` if it is a positive id, else raise InvalidArgument."""
    if value is None or value <= 0:
        raise InvalidArgument(f'{label} ID must be a positive number')
    return value


def validate_patient(data: Optional[Mapping[str, Any]]) -> None:
    if data is None:
        raise ValidationError('Patient cannot be null')
    _validate_name(data.get('first_name'), 'First name')
    _validate_name(data.get('last_name'), 'Last name')
    age = data.get('age')
    if age is None:
        raise ValidationError('Age is required')
    if age < AGE_MIN:
        raise ValidationError(f'Age must be at least {AGE_MIN}')
    if age > AGE_MAX:
        raise ValidationError(f'Age must not exceed {AGE_MAX}')


def _validate_components(data: Mapping[str, Any]) -> None:
    if _is_blank(data.get('component_name')):
        raise ValidationError('Component name is required and cannot be empty')
    if len(data['component_name']) > COMPONENT_MAX_LENGTH:
        raise ValidationError(f'Component name must be at most {COMPONENT_MAX_LENGTH} characters')
    if _is_blank(data.get('component_value')):
        raise ValidationError('Component value is required and cannot be empty')
    if len(data['component_value']) > COMPONENT_MAX_LENGTH:
        raise ValidationError(f'Component value must be at most {COMPONENT_MAX_LENGTH} characters')


def validate_clinical_data(data: Optional[Mapping[str, Any]]) -> None:
    """Rules for creating or updating a measurement directly."""
    if data is None:
        raise ValidationError('Clinical data cannot be null')
    _validate_components(data)
    if data.get('measured_date_time') is None:
        raise ValidationError('Measured date time is required')


def validate_clinical_data_dto(dto: Optional[Mapping[str, Any]]) -> None:
    """Rules for the ``{patientId, componentName, componentValue}`` shape."""
    if dto is None:
        raise ValidationError('Clinical data DTO cannot be null')
    _validate_components(dto)
    validate_patient_reference(dto.get('patient_id'))


def validate_patient_reference(patient_id: Optional[int]) -> None:
    if patient_id is None or patient_id <= 0:
        raise ValidationError('Patient ID must be a positive number')
