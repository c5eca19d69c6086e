"""
Failures raised by the treatment services.

The services never return error values; they raise one of the classes
below and leave the translation to a transport status to the API layer
(:mod:`treatment.exceptions`).
"""
from __future__ import annotations

from typing import Dict, List, Optional


class TreatmentError(Exception):
    """Base class for every failure raised by the treatment core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(TreatmentError):
    """A referenced record does not exist."""

    def __init__(self, kind: str, pk, message: Optional[str] = None):
        self.kind = kind
        self.pk = pk
        super().__init__(message or f"{kind.capitalize()} avec l'ID {pk} introuvable")


class ValidationFailure(TreatmentError):
    """A required field is blank or a bounded field is out of range."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        summary = '; '.join(f"{field}: {' '.join(msgs)}" for field, msgs in errors.items())
        super().__init__(summary or 'Données invalides')


class UnexpectedFailure(TreatmentError):
    """Any other fault, typically the database being unavailable."""
