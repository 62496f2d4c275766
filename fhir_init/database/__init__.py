"""
Database module - MongoDB connection and database definitions.
"""
from fhir_init.database.connections import (
    get_mongo_client,
    close_connections,
    ping,
)
from fhir_init.database.databases import fhir_hca_db, fhir_hcb_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "ping",
    "fhir_hca_db",
    "fhir_hcb_db",
]
