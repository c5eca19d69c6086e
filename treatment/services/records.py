import logging
from typing import Dict, List, Sequence, Type

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, models, transaction

from treatment.errors import NotFound, TreatmentError, UnexpectedFailure, ValidationFailure
from treatment.models import Dose, Medication, Patient, Physician

logger = logging.getLogger(__name__)

KINDS: Dict[str, Type[models.Model]] = {
    'physician': Physician,
    'patient': Patient,
    'medication': Medication,
    'dose': Dose,
}


def model_for(kind: str) -> Type[models.Model]:
    try:
        return KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown record kind: {kind}") from None


def _label(model: Type[models.Model]) -> str:
    return str(model._meta.verbose_name)


def fetch_by_id(kind: str, pk: int, related: Sequence[str] = ()) -> models.Model:
    model = model_for(kind)
    queryset = model.objects.select_related(*related) if related else model.objects.all()
    try:
        return queryset.get(pk=pk)
    except model.DoesNotExist:
        raise NotFound(_label(model), pk) from None
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e


def list_all(kind: str) -> List[models.Model]:
    model = model_for(kind)
    try:
        return list(model.objects.order_by('id'))
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e


def persist(instance: models.Model) -> models.Model:
    """Validate every field of ``instance`` then save it.

    Validation runs before any write so an invalid record never reaches
    the database.
    """
    try:
        instance.full_clean()
    except DjangoValidationError as e:
        raise ValidationFailure(e.message_dict) from e
    try:
        with transaction.atomic():
            instance.save()
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    return instance


def replace(instance: models.Model, **fields) -> models.Model:
    """Full-object update: every field except the id is overwritten.

    When the save fails the instance keeps its previous values.
    """
    previous = {name: getattr(instance, name) for name in fields}
    for name, value in fields.items():
        setattr(instance, name, value)
    try:
        persist(instance)
    except TreatmentError:
        for name, value in previous.items():
            setattr(instance, name, value)
        raise
    logger.info('%s %s updated', instance._meta.model_name, instance.pk)
    return instance


def delete_by_id(kind: str, pk: int) -> int:
    """Delete a record and everything it owns.

    Deleting an id that no longer exists is a no-op.  Returns the number
    of rows removed, cascaded children included.
    """
    model = model_for(kind)
    try:
        with transaction.atomic():
            removed, per_model = model.objects.filter(pk=pk).delete()
    except DatabaseError as e:
        raise UnexpectedFailure(str(e)) from e
    if removed:
        logger.info('%s %s deleted (%s)', kind, pk, per_model)
    else:
        logger.info('%s %s already absent, nothing deleted', kind, pk)
    return removed
