"""
Database models for the patient clinicals API.

A patient owns any number of clinical data points (a named measurement
such as "Blood Pressure" with its value and the time it was taken).
Table and column names follow the relational layout the service has
always used: ``patient`` and ``clinicaldata`` with ``patient_id`` on the
latter.
"""
from __future__ import annotations

from django.db import models
from django.utils import timezone


class Patient(models.Model):
    """A person whose clinical measurements are tracked."""
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    age = models.PositiveIntegerField()

    class Meta:
        db_table = 'patient'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.id})"


class ClinicalData(models.Model):
    """A single measurement recorded for a patient.

    The reference to :class:`Patient` is checked by the service layer
    before insert.  Deleting a patient does not remove its measurements,
    so the column carries no database constraint and rows may outlive
    the patient they point at.
    """
    component_name = models.CharField(max_length=255)
    component_value = models.CharField(max_length=255)
    measured_date_time = models.DateTimeField(default=timezone.now)
    patient = models.ForeignKey(
        Patient,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='clinical_data',
    )

    class Meta:
        db_table = 'clinicaldata'
        ordering = ['id']
        verbose_name_plural = 'clinical data'

    def __str__(self) -> str:
        return f"{self.component_name}={self.component_value} (patient {self.patient_id})"
