"""
fhir_hcb database configuration.
Same collections as fhir_hca, stored without validation.
"""

DB_NAME = "fhir_hcb"


class Collections:
    """Collection names in fhir_hcb."""
    ENCOUNTERS = "encounters"
    PATIENTS = "patients"
    PRACTITIONERS = "practitioners"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "FHIR encounters, patients and practitioners (hospital B)",
    "collections": [
        Collections.ENCOUNTERS,
        Collections.PATIENTS,
        Collections.PRACTITIONERS,
    ],
    "validators": {},
}
