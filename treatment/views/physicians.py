"""
Physician endpoints.

Physicians are plain records: they are created, read, replaced and
deleted.  Deleting a physician also removes the patients it supervises
together with their medications and doses.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.physician import PhysicianCreateSerializer, PhysicianSerializer, PhysicianUpdateSerializer
from ..services import records
from ..services.physicians import add_physician, update_physician


@api_view(['POST'])
@permission_classes([AllowAny])
def physician_add(request):
    data = PhysicianCreateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    physician = add_physician(
        name=data.validated_data['name'],
        first_name=data.validated_data['firstName'],
        specialty=data.validated_data['specialty'],
    )
    return Response(PhysicianSerializer(physician).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def physician_list(request):
    return Response(PhysicianSerializer(records.list_all('physician'), many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def physician_detail(request, pk: int):
    return Response(PhysicianSerializer(records.fetch_by_id('physician', pk)).data)


@api_view(['PUT'])
@permission_classes([AllowAny])
def physician_update(request):
    data = PhysicianUpdateSerializer(data=request.data)
    data.is_valid(raise_exception=True)
    physician = update_physician(
        data.validated_data['id'],
        name=data.validated_data['name'],
        first_name=data.validated_data['firstName'],
        specialty=data.validated_data['specialty'],
    )
    return Response(PhysicianSerializer(physician).data)


@api_view(['DELETE'])
@permission_classes([AllowAny])
def physician_delete(request, pk: int):
    records.delete_by_id('physician', pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
