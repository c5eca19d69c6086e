import logging

from treatment.models import Physician
from treatment.services.records import fetch_by_id, persist, replace

logger = logging.getLogger(__name__)


def add_physician(*, name: str, first_name: str, specialty: str) -> Physician:
    physician = persist(Physician(name=name, first_name=first_name, specialty=specialty))
    logger.info('physician %s created', physician.id)
    return physician


def update_physician(physician_id: int, *, name: str, first_name: str, specialty: str) -> Physician:
    physician = fetch_by_id('physician', physician_id)
    return replace(physician, name=name, first_name=first_name, specialty=specialty)
