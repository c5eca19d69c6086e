"""
Database models for the MedTrack treatment records.

Four record kinds make up a home treatment: the supervising physician,
the patient, the medications prescribed to that patient and the
individual scheduled doses of each medication.  Ownership is always
expressed by the child's foreign key; deleting a parent removes its
children through ``on_delete=CASCADE`` so that no medication or dose
outlives the record it belongs to.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


def not_blank(value: str) -> None:
    """Reject strings made only of whitespace."""
    if not (value or '').strip():
        raise ValidationError('Ce champ ne doit pas être vide.', code='blank')


class Physician(models.Model):
    """A physician supervising zero or more patients."""
    name = models.CharField(max_length=255, validators=[not_blank])
    first_name = models.CharField(max_length=255, validators=[not_blank])
    specialty = models.CharField(max_length=255, validators=[not_blank])

    class Meta:
        verbose_name = 'médecin'
        ordering = ['id']

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.first_name}"

    def __str__(self) -> str:
        return f"Dr {self.full_name} ({self.specialty})"


class Patient(models.Model):
    """A patient followed at home.

    The physician link is optional at the schema level; new patients are
    always attached to an existing physician by the lifecycle services.
    Deleting the physician removes the patients it supervises.
    """
    name = models.CharField(max_length=255, validators=[not_blank])
    first_name = models.CharField(max_length=255, validators=[not_blank])
    age = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(1, message="L'âge doit être supérieur à 0"),
            MaxValueValidator(120, message="L'âge ne doit pas dépasser 120 ans"),
        ]
    )
    # Primary condition ("maladie") the treatment is prescribed for
    condition = models.CharField(max_length=255, validators=[not_blank])
    physician = models.ForeignKey(
        Physician, null=True, blank=True, on_delete=models.CASCADE, related_name='patients', db_index=True
    )

    class Meta:
        verbose_name = 'patient'
        ordering = ['id']

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.first_name}"

    def __str__(self) -> str:
        return f"{self.full_name} ({self.condition})"


class Medication(models.Model):
    """A medication prescribed to exactly one patient."""
    name = models.CharField(max_length=255, validators=[not_blank])
    dose = models.CharField(max_length=255, validators=[not_blank])
    frequency = models.CharField(max_length=255, validators=[not_blank])
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='medications')

    class Meta:
        verbose_name = 'médicament'
        ordering = ['id']

    def describe(self) -> str:
        return f"{self.name} ({self.dose}, {self.frequency})"

    def __str__(self) -> str:
        return f"{self.name} -> patient {self.patient_id}"


class Dose(models.Model):
    """A single scheduled intake ("prise") of a medication.

    ``patient`` is copied from the medication when the dose is created and
    is not refreshed if the medication is later reassigned to another
    patient.  It is nullable because a full-object update may clear it.
    """
    date = models.CharField(max_length=32, validators=[not_blank])
    time = models.CharField(max_length=32, validators=[not_blank])
    administered = models.BooleanField(default=False, db_index=True)
    medication = models.ForeignKey(Medication, on_delete=models.CASCADE, related_name='doses')
    patient = models.ForeignKey(
        Patient, null=True, blank=True, on_delete=models.CASCADE, related_name='doses'
    )

    class Meta:
        verbose_name = 'prise'
        ordering = ['id']
        indexes = [
            models.Index(fields=['patient', 'medication', 'administered'], name='dose_patient_med_state_idx'),
        ]

    @property
    def state_label(self) -> str:
        return 'effectuée' if self.administered else 'non effectuée'

    def __str__(self) -> str:
        return f"Dose {self.id}: {self.date} {self.time} ({self.state_label})"
