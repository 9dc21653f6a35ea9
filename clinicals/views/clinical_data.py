"""
Clinical data endpoints.

Measurements can be created directly (``POST /clinicaldata`` with a
``measuredDateTime`` and ``patientId``) or recorded for a patient through
``POST /clinicaldata/save``, where the server stamps the time.
"""
from __future__ import annotations

from django.db import transaction
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from clinicals.serializers import decode
from clinicals.serializers.clinical_data import (
    ClinicalDataDTOSerializer,
    ClinicalDataSerializer,
    ClinicalDataWriteSerializer,
)
from clinicals.services import clinical_data_service


@swagger_auto_schema(method='post', request_body=ClinicalDataWriteSerializer, responses={201: ClinicalDataSerializer})
@api_view(['GET', 'POST'])
def clinical_data(request):
    if request.method == 'GET':
        return Response(ClinicalDataSerializer(clinical_data_service.list_all(), many=True).data)

    data = decode(ClinicalDataWriteSerializer, request.data)
    with transaction.atomic():
        record = clinical_data_service.create(data)
    return Response(ClinicalDataSerializer(record).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='put', request_body=ClinicalDataWriteSerializer, responses={200: ClinicalDataSerializer})
@api_view(['GET', 'PUT', 'DELETE'])
def clinical_data_detail(request, pk: int):
    if request.method == 'GET':
        return Response(ClinicalDataSerializer(clinical_data_service.get_by_id(pk)).data)

    if request.method == 'PUT':
        details = decode(ClinicalDataWriteSerializer, request.data)
        with transaction.atomic():
            record = clinical_data_service.update(pk, details)
        return Response(ClinicalDataSerializer(record).data)

    with transaction.atomic():
        clinical_data_service.delete(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@swagger_auto_schema(method='post', request_body=ClinicalDataDTOSerializer, responses={201: ClinicalDataSerializer})
@api_view(['POST'])
def save_for_patient(request):
    """Record a measurement for an existing patient, timestamped now."""
    dto = decode(ClinicalDataDTOSerializer, request.data)
    with transaction.atomic():
        record = clinical_data_service.create_for_patient(dto)
    return Response(ClinicalDataSerializer(record).data, status=status.HTTP_201_CREATED)
