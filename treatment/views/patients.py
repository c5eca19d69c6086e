"""
Patient endpoints.

Besides the record operations this module exposes the three text
reports built from a patient's treatment: the paged listing, the
unpaged listing and the adherence dossier.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.patient import (
    PatientCreateSerializer,
    PatientPageQuerySerializer,
    PatientSerializer,
    PatientUpdateSerializer,
)
from ..services import records
from ..services.dossier import build_dossier
from ..services.listing import patient_page, render_all_patients, render_patient_page
from ..services.patients import add_patient, update_patient


@api_view(['POST'])
@permission_classes([AllowAny])
def patient_add(request):
    data = PatientCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    patient, message = add_patient(
        name=data.validated_data['name'],
        first_name=data.validated_data['firstName'],
        age=data.validated_data['age'],
        condition=data.validated_data['condition'],
        physician_id=data.validated_data['physicianId'],
    )
    return Response({'ok': True, 'id': patient.id, 'message': message}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_list(request):
    """Every patient with their medications, as text."""
    return Response({'ok': True, 'report': render_all_patients()})


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_paged(request):
    """One page of patients as text.

    Query params:
      - page: 0-based page index (default 0)
      - size: patients per page (default ``MEDTRACK_PAGE_SIZE``)
      - sortBy: patient field to sort on, ``-`` prefix for descending
    """
    q = PatientPageQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    result = patient_page(
        page=q.validated_data.get('page'),
        size=q.validated_data.get('size'),
        sort_by=q.validated_data.get('sortBy'),
    )
    return Response({'ok': True, 'report': render_patient_page(result)})


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_detail(request, pk: int):
    return Response(PatientSerializer(records.fetch_by_id('patient', pk)).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def patient_dossier(request, pk: int):
    dossier = build_dossier(pk)
    return Response({
        'ok': True,
        'report': dossier.render(),
        'counts': {
            'total': dossier.total,
            'administered': dossier.administered,
            'notAdministered': dossier.not_administered,
        },
    })


@api_view(['PUT'])
@permission_classes([AllowAny])
def patient_update(request):
    data = PatientUpdateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    patient = update_patient(
        data.validated_data['id'],
        name=data.validated_data['name'],
        first_name=data.validated_data['firstName'],
        age=data.validated_data['age'],
        condition=data.validated_data['condition'],
        physician_id=data.validated_data.get('physicianId'),
    )
    return Response(PatientSerializer(patient).data)


@api_view(['DELETE'])
@permission_classes([AllowAny])
def patient_delete(request, pk: int):
    records.delete_by_id('patient', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
