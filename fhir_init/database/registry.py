"""
Database bootstrap.
Creates every database and collection listed in the manifests, in order.
"""
import logging
from typing import Any, Iterable

from pymongo import MongoClient

from fhir_init.database.databases import fhir_hca_db, fhir_hcb_db

logger = logging.getLogger(__name__)

# All database manifests, in creation order
ALL_DB_MANIFESTS = [
    fhir_hca_db.DB_MANIFEST,
    fhir_hcb_db.DB_MANIFEST,
]


def collection_options(manifest: dict[str, Any], name: str) -> dict[str, Any]:
    """Options for create_collection: the validator if one is declared, else none."""
    return dict(manifest.get("validators", {}).get(name, {}))


def bootstrap_database(client: MongoClient, manifest: dict[str, Any]) -> None:
    """
    Create the collections of one database.

    Existing collections are not checked for: the driver raises
    CollectionInvalid and the error propagates to the caller.
    """
    db_name = manifest["db_name"]
    db = client.get_database(db_name)
    logger.info(f"Provisioning database '{db_name}': {manifest['purpose']}")

    for name in manifest["collections"]:
        options = collection_options(manifest, name)
        db.create_collection(name, **options)
        if options:
            logger.info(
                f"Created collection '{db_name}.{name}' "
                f"(validationLevel={options['validationLevel']}, "
                f"validationAction={options['validationAction']})"
            )
        else:
            logger.info(f"Created collection '{db_name}.{name}'")


def bootstrap_databases(
    client: MongoClient,
    manifests: Iterable[dict[str, Any]] = ALL_DB_MANIFESTS,
) -> None:
    """Provision every database manifest in order."""
    for manifest in manifests:
        bootstrap_database(client, manifest)
