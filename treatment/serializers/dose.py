from rest_framework import serializers

from treatment.models import Dose
from treatment.serializers.fields import CleanCharField


class DoseCreateSerializer(serializers.Serializer):
    time = CleanCharField(max_length=32)
    date = CleanCharField(max_length=32)
    medicationId = serializers.IntegerField(min_value=1)


class DoseUpdateSerializer(DoseCreateSerializer):
    id = serializers.IntegerField(min_value=1)
    administered = serializers.BooleanField()
    patientId = serializers.IntegerField(min_value=1, required=False, allow_null=True)


class DoseStateQuerySerializer(serializers.Serializer):
    doseId = serializers.IntegerField(min_value=1)
    administered = serializers.BooleanField()


class DoseSerializer(serializers.ModelSerializer):
    medicationId = serializers.IntegerField(source='medication_id')
    patientId = serializers.IntegerField(source='patient_id', allow_null=True)

    class Meta:
        model = Dose
        fields = ['id', 'date', 'time', 'administered', 'medicationId', 'patientId']
