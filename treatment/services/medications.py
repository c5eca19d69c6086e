import logging
from typing import Tuple

from treatment.models import Medication
from treatment.services.records import fetch_by_id, persist, replace

logger = logging.getLogger(__name__)


def add_medication(*, name: str, dose: str, frequency: str, patient_id: int) -> Tuple[Medication, str]:
    patient = fetch_by_id('patient', patient_id)
    medication = persist(Medication(name=name, dose=dose, frequency=frequency, patient=patient))
    logger.info('medication %s created for patient %s', medication.id, patient.id)
    message = f"Le médicament '{medication.name}' a été ajouté pour le patient '{patient.full_name}'."
    return medication, message


def update_medication(medication_id: int, *, name: str, dose: str, frequency: str, patient_id: int) -> Medication:
    """Replace a medication.

    Moving a medication to another patient leaves the patient recorded on
    its existing doses untouched.
    """
    medication = fetch_by_id('medication', medication_id)
    patient = fetch_by_id('patient', patient_id)
    return replace(
        medication,
        name=name, dose=dose, frequency=frequency, patient=patient,
    )
