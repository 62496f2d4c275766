"""
Pydantic models for database documents.
"""
from fhir_init.models.encounter import (
    Encounter,
    EncounterClass,
    EncounterStatus,
    Period,
)

__all__ = [
    "Encounter",
    "EncounterClass",
    "EncounterStatus",
    "Period",
]
