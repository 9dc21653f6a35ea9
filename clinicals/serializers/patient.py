from rest_framework import serializers

from clinicals.models import Patient
from clinicals.serializers.clinical_data import ClinicalDataSerializer


class PatientSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    clinicalData = ClinicalDataSerializer(source='clinical_data', many=True, read_only=True)

    class Meta:
        model = Patient
        fields = ['id', 'firstName', 'lastName', 'age', 'clinicalData']


class PatientWriteSerializer(serializers.Serializer):
    """Body of ``POST /patients`` and ``PUT /patients/{id}``.

    Decodes types only; an ``id`` in the body is ignored.
    """
    firstName = serializers.CharField(source='first_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    lastName = serializers.CharField(source='last_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    age = serializers.IntegerField(required=False, allow_null=True)
