import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.conf import settings
from django.db import DatabaseError

from treatment.errors import UnexpectedFailure, ValidationFailure
from treatment.models import Medication, Patient
from treatment.services.dossier import NO_MEDICATION

logger = logging.getLogger(__name__)

EMPTY_PAGE = 'Aucun patient à afficher dans cette page.'
NO_PATIENT = 'Aucun patient trouvé dans la base de données.'
SEPARATOR = '-----------------------------'

SORTABLE_FIELDS = frozenset(f.name for f in Patient._meta.concrete_fields)


@dataclass
class PatientPage:
    index: int
    size: int
    total: int
    patients: List[Patient] = field(default_factory=list)
    medications: Dict[int, List[Medication]] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def is_empty(self) -> bool:
        return not self.patients


def _medications_by_patient(patient_ids: List[int]) -> Dict[int, List[Medication]]:
    grouped: Dict[int, List[Medication]] = defaultdict(list)
    for med in Medication.objects.filter(patient_id__in=patient_ids).order_by('id'):
        grouped[med.patient_id].append(med)
    return grouped


def _sort_key_is_valid(sort_by: str) -> bool:
    field_name = sort_by[1:] if sort_by.startswith('-') else sort_by
    return field_name in SORTABLE_FIELDS


def patient_page(page: Optional[int] = None, size: Optional[int] = None, sort_by: Optional[str] = None) -> PatientPage:
    """Return one page of patients sorted by ``sort_by``.

    ``page`` is 0-based.  A leading ``-`` on ``sort_by`` sorts descending;
    ties are broken by id.  An unknown sort field or a page past the end
    gives an empty page instead of an error.
    """
    page = 0 if page is None else page
    size = settings.MEDTRACK_PAGE_SIZE if size is None else size
    sort_by = sort_by or settings.MEDTRACK_SORT_BY
    if size < 1:
        raise ValidationFailure({'size': ['La taille de page doit être au moins 1.']})
    try:
        total = Patient.objects.count()
        if page < 0 or page * size >= total or not _sort_key_is_valid(sort_by):
            logger.warning('empty patient page for page=%s sort=%r', page, sort_by)
            return PatientPage(index=page, size=size, total=total)
        start = page * size
        patients = list(Patient.objects.order_by(sort_by, 'id')[start:start + size])
        medications = _medications_by_patient([p.id for p in patients])
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    return PatientPage(index=page, size=size, total=total, patients=patients, medications=medications)


def _render_patient(patient: Patient, medications: List[Medication]) -> List[str]:
    lines = [
        f"Patient : {patient.name} {patient.first_name}",
        f"Âge : {patient.age}",
        f"Maladie : {patient.condition}",
    ]
    if medications:
        lines.append('Médicaments :')
        lines += [f"- {m.describe()}" for m in medications]
    else:
        lines.append(NO_MEDICATION)
    lines += ['', SEPARATOR, '']
    return lines


def render_patient_page(result: PatientPage) -> str:
    if result.is_empty:
        return EMPTY_PAGE
    lines = [
        f"Page {result.index + 1}/{result.total_pages}",
        f"Nombre total de patients : {result.total}",
        f"Taille de page : {result.size}",
        '',
    ]
    for patient in result.patients:
        lines += _render_patient(patient, result.medications.get(patient.id, []))
    return '\n'.join(lines)


def render_all_patients() -> str:
    try:
        patients = list(Patient.objects.order_by('id'))
        medications = _medications_by_patient([p.id for p in patients])
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    if not patients:
        return NO_PATIENT
    lines = ['Liste des patients enregistrés :']
    for patient in patients:
        lines += _render_patient(patient, medications.get(patient.id, []))
    return '\n'.join(lines)
