from rest_framework import serializers

from treatment.models import Medication
from treatment.serializers.fields import CleanCharField


class MedicationCreateSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    dose = CleanCharField(max_length=255)
    frequency = CleanCharField(max_length=255)
    patientId = serializers.IntegerField(min_value=1)


class MedicationUpdateSerializer(MedicationCreateSerializer):
    id = serializers.IntegerField(min_value=1)


class MedicationSerializer(serializers.ModelSerializer):
    patientId = serializers.IntegerField(source='patient_id')

    class Meta:
        model = Medication
        fields = ['id', 'name', 'dose', 'frequency', 'patientId']
