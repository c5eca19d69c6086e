from rest_framework import serializers

from treatment.models import Physician
from treatment.serializers.fields import CleanCharField


class PhysicianCreateSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    firstName = CleanCharField(max_length=255)
    specialty = CleanCharField(max_length=255)


class PhysicianUpdateSerializer(PhysicianCreateSerializer):
    id = serializers.IntegerField(min_value=1)


class PhysicianSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name')

    class Meta:
        model = Physician
        fields = ['id', 'name', 'firstName', 'specialty']
