"""
Database connection management for MongoDB.
"""
from typing import Optional

from pymongo import MongoClient

from fhir_init.config import get_settings

# Global connection instance
_mongo_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        options = {
            "serverSelectionTimeoutMS": settings.mongo_timeout_ms,
            "connectTimeoutMS": settings.mongo_timeout_ms,
        }
        if settings.mongo_username:
            options["username"] = settings.mongo_username
            options["password"] = settings.mongo_password
        _mongo_client = MongoClient(settings.mongo_uri, **options)
    return _mongo_client


def ping(client: MongoClient) -> None:
    """Fail fast if the server is unreachable or rejects the credentials."""
    client.admin.command("ping")


def close_connections() -> None:
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
