import logging
from typing import List, Optional, Tuple

from django.db import DatabaseError

from treatment.errors import UnexpectedFailure
from treatment.models import Dose, Patient
from treatment.services.records import fetch_by_id, persist, replace

logger = logging.getLogger(__name__)


def add_dose(*, time: str, date: str, medication_id: int) -> Tuple[Dose, str]:
    medication = fetch_by_id('medication', medication_id)
    patient = medication.patient
    dose = persist(Dose(
        time=time, date=date, administered=False, medication=medication, patient=patient,
    ))
    logger.info('dose %s scheduled for medication %s', dose.id, medication.id)
    message = f"Prise ajoutée pour le médicament '{medication.name}' du patient '{patient.full_name}'."
    return dose, message


def update_dose(dose_id: int, *, date: str, time: str, administered: bool, medication_id: int,
                patient_id: Optional[int] = None) -> Dose:
    dose = fetch_by_id('dose', dose_id)
    medication = fetch_by_id('medication', medication_id)
    patient = fetch_by_id('patient', patient_id) if patient_id is not None else None
    return replace(
        dose,
        date=date, time=time, administered=administered, medication=medication, patient=patient,
    )


def set_dose_state(dose_id: int, administered: bool) -> Tuple[Dose, str]:
    dose = fetch_by_id('dose', dose_id, related=('medication', 'patient'))
    dose.administered = bool(administered)
    try:
        dose.save(update_fields=['administered'])
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    logger.info('dose %s marked administered=%s', dose.id, dose.administered)
    patient_name = dose.patient.full_name if dose.patient else 'inconnu'
    message = (
        f"La prise du {dose.date} à {dose.time} du patient '{patient_name}' pour le médicament "
        f"'{dose.medication.name}' a été marquée comme {dose.state_label}."
    )
    return dose, message


def find_missed_doses(patient_id: int, medication_id: int) -> Tuple[Patient, List[Dose]]:
    """Doses of ``medication_id`` recorded for ``patient_id`` and not taken.

    Only the patient is checked; an unknown medication simply matches
    nothing.  Doses come back in storage order.
    """
    patient = fetch_by_id('patient', patient_id)
    try:
        missed = list(
            Dose.objects.select_related('medication')
            .filter(patient_id=patient_id, medication_id=medication_id, administered=False)
            .order_by('id')
        )
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    return patient, missed


def render_missed_doses(patient: Patient, missed: List[Dose]) -> str:
    if not missed:
        return f"Le patient {patient.full_name} n'a oublié aucune prise pour ce médicament."
    lines = [
        f"Le patient {patient.full_name} a oublié {len(missed)} prise(s) "
        f"du médicament {missed[0].medication.name}.",
        '',
        'Détails des prises oubliées :',
    ]
    lines += [f"- Date : {d.date}, Heure : {d.time}" for d in missed]
    return '\n'.join(lines) + '\n'
