"""
Medication endpoints.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.medication import MedicationCreateSerializer, MedicationSerializer, MedicationUpdateSerializer
from ..services import records
from ..services.medications import add_medication, update_medication


@api_view(['POST'])
@permission_classes([AllowAny])
def medication_add(request):
    data = MedicationCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    medication, message = add_medication(
        name=data.validated_data['name'],
        dose=data.validated_data['dose'],
        frequency=data.validated_data['frequency'],
        patient_id=data.validated_data['patientId'],
    )
    return Response({'ok': True, 'id': medication.id, 'message': message}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def medication_list(request):
    return Response(MedicationSerializer(records.list_all('medication'), many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def medication_detail(request, pk: int):
    return Response(MedicationSerializer(records.fetch_by_id('medication', pk)).data)


@api_view(['PUT'])
@permission_classes([AllowAny])
def medication_update(request):
    data = MedicationUpdateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    medication = update_medication(
        data.validated_data['id'],
        name=data.validated_data['name'],
        dose=data.validated_data['dose'],
        frequency=data.validated_data['frequency'],
        patient_id=data.validated_data['patientId'],
    )
    return Response(MedicationSerializer(medication).data)


@api_view(['DELETE'])
@permission_classes([AllowAny])
def medication_delete(request, pk: int):
    records.delete_by_id('medication', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
