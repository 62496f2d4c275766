"""
Encounter model for the fhir_hca database.

Mirrors the ``$jsonSchema`` validator attached to ``fhir_hca.encounters`` so
documents can be checked before they reach the server.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class EncounterStatus(str, Enum):
    """FHIR encounter status codes."""
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    DISCHARGED = "discharged"
    COMPLETED = "completed"
    FINISHED = "finished"
    CANCELLED = "cancelled"
    DISCONTINUED = "discontinued"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class EncounterClass(str, Enum):
    """FHIR encounter class codes (v3 ActEncounterCode)."""
    INPATIENT = "IMP"
    AMBULATORY = "AMB"
    OBSERVATION = "OBSENC"
    EMERGENCY = "EMER"
    VIRTUAL = "VR"
    HOME_HEALTH = "HH"


class Period(BaseModel):
    """Start and optional end of an encounter."""
    # BSON dates only: no coercion from ISO strings or timestamps
    model_config = ConfigDict(strict=True, extra="allow")

    start: datetime = Field(..., description="Encounter start")
    end: Optional[datetime] = Field(None, description="Encounter end, null while ongoing")


class Encounter(BaseModel):
    """
    Encounter document model for MongoDB fhir_hca.encounters collection.

    Properties not named by the validator are allowed and kept.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    fhir_id: str = Field(..., alias="fhirId", strict=True, description="Hapi Api FhirID")
    full_url: str = Field(
        ...,
        alias="fullUrl",
        strict=True,
        description="FullUrl of the resource at Api Hapi",
    )
    status: EncounterStatus = Field(..., description="Encounter Status")
    encounter_class: EncounterClass = Field(..., alias="class", description="Encounter Class")
    period: Period
    practitioner_id: Optional[ObjectId] = Field(
        None,
        alias="practitionerId",
        description="Internal Reference to Practitioner Resource",
    )
    patient_id: Optional[ObjectId] = Field(
        None,
        alias="patientId",
        description="Internal Reference to Patient Resource",
    )

    def to_document(self) -> dict[str, Any]:
        """
        Build the document as stored in MongoDB.

        Unset references are left out rather than written as null: the
        validator only admits null for ``period.end``. Extra properties are
        written back unchanged.
        """
        doc = self.model_dump(by_alias=True, exclude={"practitioner_id", "patient_id"})
        if self.practitioner_id is not None:
            doc["practitionerId"] = self.practitioner_id
        if self.patient_id is not None:
            doc["patientId"] = self.patient_id
        return doc
