import logging
from typing import Optional, Tuple

from treatment.models import Patient
from treatment.services.records import fetch_by_id, persist, replace

logger = logging.getLogger(__name__)


def add_patient(*, name: str, first_name: str, age: int, condition: str, physician_id: int) -> Tuple[Patient, str]:
    physician = fetch_by_id('physician', physician_id)
    patient = persist(Patient(
        name=name, first_name=first_name, age=age, condition=condition, physician=physician,
    ))
    logger.info('patient %s created under physician %s', patient.id, physician.id)
    message = (
        f"Patient {patient.full_name} ajouté avec succès au médecin {physician.full_name}."
    )
    return patient, message


def update_patient(patient_id: int, *, name: str, first_name: str, age: int, condition: str,
                   physician_id: Optional[int] = None) -> Patient:
    patient = fetch_by_id('patient', patient_id)
    # Omitting the physician clears the link, as with every other field
    physician = fetch_by_id('physician', physician_id) if physician_id is not None else None
    return replace(
        patient,
        name=name, first_name=first_name, age=age, condition=condition, physician=physician,
    )
