"""
Database definitions and collection constants.
"""
from fhir_init.database.databases import fhir_hca_db, fhir_hcb_db

__all__ = ["fhir_hca_db", "fhir_hcb_db"]
