"""
URL mappings for the patient clinicals API.

Paths live at the root without a version prefix and without trailing
slashes.  Identifiers are matched as signed integers so that ``0`` and
negative values reach the service and are rejected with 400 rather than
falling through to an unmatched route.
"""
from django.urls import include, path, register_converter

from .views import clinical_data, health, patients


class SignedIntConverter:
    regex = '-?[0-9]+'

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value) -> str:
        return str(value)


register_converter(SignedIntConverter, 'sint')


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Patients
    path('patients', patients.patients, name='patients'),
    path('patients/<sint:pk>', patients.patient_detail, name='patient_detail'),
    # Clinical data
    path('clinicaldata', clinical_data.clinical_data, name='clinical_data'),
    path('clinicaldata/save', clinical_data.save_for_patient, name='clinical_data_save'),
    path('clinicaldata/<sint:pk>', clinical_data.clinical_data_detail, name='clinical_data_detail'),
]
