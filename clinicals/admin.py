"""
Django admin registrations for the clinicals models.

Superusers can inspect and correct patients and their measurements via
the ``/admin/`` URL.  Admin edits bypass the service layer, so the API
validation rules are not applied here.
"""

from django.contrib import admin

from .models import ClinicalData, Patient


class ClinicalDataInline(admin.TabularInline):
    model = ClinicalData
    extra = 0
    fields = ('component_name', 'component_value', 'measured_date_time')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'age')
    search_fields = ('first_name', 'last_name')
    inlines = [ClinicalDataInline]


@admin.register(ClinicalData)
class ClinicalDataAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_id', 'component_name', 'component_value', 'measured_date_time')
    list_filter = ('component_name',)
    search_fields = ('component_name', 'component_value')
    raw_id_fields = ('patient',)
