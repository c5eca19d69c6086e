"""
Dose ("prise") endpoints.

Doses are scheduled against a medication and inherit its patient at
creation.  Marking a dose as taken or not goes through the dedicated
``update-state`` endpoint; ``missed`` lists the doses a patient did not
take for one medication.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.dose import DoseCreateSerializer, DoseSerializer, DoseStateQuerySerializer, DoseUpdateSerializer
from ..services import records
from ..services.doses import add_dose, find_missed_doses, render_missed_doses, set_dose_state, update_dose


@api_view(['POST'])
@permission_classes([AllowAny])
def dose_add(request):
    data = DoseCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    dose, message = add_dose(
        time=data.validated_data['time'],
        date=data.validated_data['date'],
        medication_id=data.validated_data['medicationId'],
    )
    return Response({'ok': True, 'id': dose.id, 'message': message}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def dose_list(request):
    return Response(DoseSerializer(records.list_all('dose'), many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def dose_detail(request, pk: int):
    return Response(DoseSerializer(records.fetch_by_id('dose', pk)).data)


@api_view(['PUT'])
@permission_classes([AllowAny])
def dose_update(request):
    data = DoseUpdateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    dose = update_dose(
        data.validated_data['id'],
        date=data.validated_data['date'],
        time=data.validated_data['time'],
        administered=data.validated_data['administered'],
        medication_id=data.validated_data['medicationId'],
        patient_id=data.validated_data.get('patientId'),
    )
    return Response(DoseSerializer(dose).data)


@api_view(['PUT'])
@permission_classes([AllowAny])
def dose_update_state(request):
    """Mark a dose as taken or not.

    Query params: ``doseId`` and ``administered`` (true/false).
    """
    q = DoseStateQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    dose, message = set_dose_state(q.validated_data['doseId'], q.validated_data['administered'])
    return Response({'ok': True, 'message': message, 'administered': dose.administered})


@api_view(['GET'])
@permission_classes([AllowAny])
def dose_missed(request, patient_id: int, medication_id: int):
    patient, missed = find_missed_doses(patient_id, medication_id)
    return Response({
        'ok': True,
        'count': len(missed),
        'report': render_missed_doses(patient, missed),
    })


@api_view(['DELETE'])
@permission_classes([AllowAny])
def dose_delete(request, pk: int):
    records.delete_by_id('dose', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
