from rest_framework import serializers

from clinicals.models import ClinicalData


class ClinicalDataSerializer(serializers.ModelSerializer):
    componentName = serializers.CharField(source='component_name')
    componentValue = serializers.CharField(source='component_value')
    measuredDateTime = serializers.DateTimeField(source='measured_date_time')
    patientId = serializers.IntegerField(source='patient_id')

    class Meta:
        model = ClinicalData
        fields = ['id', 'componentName', 'componentValue', 'measuredDateTime', 'patientId']


class ClinicalDataWriteSerializer(serializers.Serializer):
    """Body of ``POST /clinicaldata`` and ``PUT /clinicaldata/{id}``.

    Only types are checked here; the blank/required rules are applied by
    the service so that they hold for every caller.  ``patientId`` is
    ignored on update.
    """
    componentName = serializers.CharField(source='component_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    componentValue = serializers.CharField(source='component_value', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    measuredDateTime = serializers.DateTimeField(source='measured_date_time', required=False, allow_null=True)
    patientId = serializers.IntegerField(source='patient_id', required=False, allow_null=True)


class ClinicalDataDTOSerializer(serializers.Serializer):
    """Body of ``POST /clinicaldata/save``."""
    componentName = serializers.CharField(source='component_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    componentValue = serializers.CharField(source='component_value', required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    patientId = serializers.IntegerField(source='patient_id', required=False, allow_null=True)
