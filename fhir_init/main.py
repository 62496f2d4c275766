"""
FHIR Database Bootstrap

Provisions the fhir_hca and fhir_hcb databases with their encounters,
patients and practitioners collections. fhir_hca.encounters is created with a
strict $jsonSchema validator. Meant to run once against an empty server.

Usage:
    fhir-init
    python -m fhir_init

Environment Variables:
    MONGO_URI: MongoDB connection string
    MONGO_USERNAME / MONGO_PASSWORD: Credentials (optional)
    MONGO_TIMEOUT_MS: Server selection timeout (default: 10000)
    LOG_LEVEL: Logging level (default: INFO)
    LOG_FORMAT: text or json (default: text)
    LOG_PATH: Directory for rotated log files (optional)
"""
import logging

from pymongo.errors import PyMongoError

from fhir_init.config import get_settings
from fhir_init.core.log_config import setup_logging
from fhir_init.database.connections import close_connections, get_mongo_client, ping
from fhir_init.database.registry import ALL_DB_MANIFESTS, bootstrap_databases

logger = logging.getLogger("fhir_init")


def main() -> int:
    """Run the bootstrap once. Returns the process exit code."""
    settings = get_settings()
    setup_logging(settings)

    logger.info("=" * 60)
    logger.info("FHIR Database Bootstrap")
    logger.info(f"Databases: {', '.join(m['db_name'] for m in ALL_DB_MANIFESTS)}")
    logger.info("=" * 60)

    step = "connect"
    try:
        client = get_mongo_client()
        ping(client)
        logger.info("Connected to MongoDB")

        step = "bootstrap"
        bootstrap_databases(client)
    except PyMongoError as e:
        logger.error(f"Bootstrap failed during {step}: {e}")
        return 1
    finally:
        close_connections()

    logger.info("Bootstrap complete")
    return 0


def run() -> None:
    """Console script entry point."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
