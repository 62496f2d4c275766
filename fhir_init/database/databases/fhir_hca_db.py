"""
fhir_hca database configuration.
Clinical records synced from the HAPI FHIR server; encounters are schema-validated.
"""
from fhir_init.models.encounter import EncounterClass, EncounterStatus

DB_NAME = "fhir_hca"


class Collections:
    """Collection names in fhir_hca."""
    ENCOUNTERS = "encounters"
    PATIENTS = "patients"
    PRACTITIONERS = "practitioners"


ENCOUNTER_JSON_SCHEMA = {
    "bsonType": "object",
    "required": ["fhirId", "fullUrl", "status", "class", "period"],
    "properties": {
        "fhirId": {"bsonType": "string", "description": "Hapi Api FhirID"},
        "fullUrl": {"bsonType": "string", "description": "FullUrl of the resource at Api Hapi"},
        "status": {
            "enum": [status.value for status in EncounterStatus],
            "description": "Encounter Status",
        },
        "class": {
            "enum": [encounter_class.value for encounter_class in EncounterClass],
            "description": "Encounter Class",
        },
        "period": {
            "bsonType": "object",
            "required": ["start"],
            "properties": {
                "start": {"bsonType": "date"},
                "end": {"bsonType": ["date", "null"]},
            },
        },
        "practitionerId": {
            "bsonType": "objectId",
            "description": "Internal Reference to Practitioner Resource",
        },
        "patientId": {
            "bsonType": "objectId",
            "description": "Internal Reference to Patient Resource",
        },
    },
}

# Options passed to create_collection for the encounters collection
ENCOUNTERS_VALIDATOR = {
    "validator": {"$jsonSchema": ENCOUNTER_JSON_SCHEMA},
    "validationLevel": "strict",
    "validationAction": "error",
}


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "FHIR encounters, patients and practitioners (hospital A)",
    "collections": [
        Collections.ENCOUNTERS,
        Collections.PATIENTS,
        Collections.PRACTITIONERS,
    ],
    "validators": {
        Collections.ENCOUNTERS: ENCOUNTERS_VALIDATOR,
    },
}
