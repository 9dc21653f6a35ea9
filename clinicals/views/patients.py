"""
Patient endpoints.

``/patients`` lists and creates, ``/patients/{id}`` reads, replaces and
deletes.  Errors raised by the service are rendered by the API exception
handler.
"""
from __future__ import annotations

from django.db import transaction
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from clinicals.serializers import decode
from clinicals.serializers.patient import PatientSerializer, PatientWriteSerializer
from clinicals.services import patient_service


@swagger_auto_schema(method='post', request_body=PatientWriteSerializer, responses={201: PatientSerializer})
@api_view(['GET', 'POST'])
def patients(request):
    """List every patient, or create one from ``firstName``/``lastName``/``age``."""
    if request.method == 'GET':
        return Response(PatientSerializer(patient_service.list_all(), many=True).data)

    data = decode(PatientWriteSerializer, request.data)
    with transaction.atomic():
        patient = patient_service.create(data)
    return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='put', request_body=PatientWriteSerializer, responses={200: PatientSerializer})
@api_view(['GET', 'PUT', 'DELETE'])
def patient_detail(request, pk: int):
    """Read, fully replace or delete a single patient.

    ``PUT`` requires every field; deleting a patient leaves its clinical
    data in place.
    """
    if request.method == 'GET':
        return Response(PatientSerializer(patient_service.get_by_id(pk)).data)

    if request.method == 'PUT':
        details = decode(PatientWriteSerializer, request.data)
        with transaction.atomic():
            patient = patient_service.update(pk, details)
        return Response(PatientSerializer(patient).data)

    with transaction.atomic():
        patient_service.delete(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
