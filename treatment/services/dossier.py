"""
Adherence dossier for a single patient.

The dossier is recomputed from the stored medications and doses on every
call.  Doses are counted from their own patient reference, so a dose
stays on the dossier of the patient it was scheduled for even after its
medication is moved to someone else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from django.db import DatabaseError
from django.db.models import Count, Q

from treatment.errors import UnexpectedFailure
from treatment.models import Dose, Medication, Patient
from treatment.services.records import fetch_by_id

NO_MEDICATION = 'Aucun médicament enregistré.'


@dataclass
class Dossier:
    patient: Patient
    medications: List[Medication] = field(default_factory=list)
    total: int = 0
    administered: int = 0
    not_administered: int = 0

    def render(self) -> str:
        lines = [
            'Dossier du patient :',
            f"Nom : {self.patient.name}",
            f"Prénom : {self.patient.first_name}",
            f"Maladie : {self.patient.condition}",
            f"Âge : {self.patient.age}",
            'Médicaments :',
        ]
        if self.medications:
            lines += [f"- {m.describe()}" for m in self.medications]
        else:
            lines.append(NO_MEDICATION)
        lines += [
            f"Prises enregistrées : {self.total}",
            f"Effectuées : {self.administered}",
            f"Oubliées : {self.not_administered}",
        ]
        return '\n'.join(lines)


def build_dossier(patient_id: int) -> Dossier:
    patient = fetch_by_id('patient', patient_id)
    try:
        medications = list(Medication.objects.filter(patient_id=patient_id).order_by('id'))
        counts = Dose.objects.filter(patient_id=patient_id).aggregate(
            total=Count('id'),
            administered_count=Count('id', filter=Q(administered=True)),
            not_administered_count=Count('id', filter=Q(administered=False)),
        )
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    return Dossier(
        patient=patient,
        medications=medications,
        total=counts['total'],
        administered=counts['administered_count'],
        not_administered=counts['not_administered_count'],
    )
