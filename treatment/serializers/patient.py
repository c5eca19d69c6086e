from rest_framework import serializers

from treatment.models import Patient
from treatment.serializers.fields import CleanCharField


class PatientCreateSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    firstName = CleanCharField(max_length=255)
    age = serializers.IntegerField(min_value=1, max_value=120)
    condition = CleanCharField(max_length=255)
    physicianId = serializers.IntegerField(min_value=1)


class PatientUpdateSerializer(PatientCreateSerializer):
    id = serializers.IntegerField(min_value=1)
    physicianId = serializers.IntegerField(min_value=1, required=False, allow_null=True)


class PatientPageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, min_value=0)
    size = serializers.IntegerField(required=False, min_value=1, max_value=200)
    sortBy = serializers.CharField(required=False, max_length=64)


class PatientSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name')
    physicianId = serializers.IntegerField(source='physician_id', allow_null=True)

    class Meta:
        model = Patient
        fields = ['id', 'name', 'firstName', 'age', 'condition', 'physicianId']
