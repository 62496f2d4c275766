"""
Global test fixtures for fhir-db-init.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- Settings and connection state reset
- Encounter document factories
"""

import logging
from datetime import datetime, timezone

import pytest
from bson import ObjectId

import fhir_init.database.connections as conn_module
from fhir_init.config import get_settings


# =============================================================================
# Environment Isolation
# =============================================================================

SETTINGS_ENV_VARS = [
    "MONGO_URI",
    "MONGO_USERNAME",
    "MONGO_PASSWORD",
    "MONGO_TIMEOUT_MS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_PATH",
    "LOG_BACKUP_COUNT",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Clear settings-related env vars, the settings cache and the global client.

    Keeps tests independent of the developer's shell and of each other.
    """
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    conn_module._mongo_client = None
    yield
    get_settings.cache_clear()
    conn_module._mongo_client = None


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    mongomock does not support creation options such as validators, so only
    unvalidated manifests can be provisioned against it.
    """
    try:
        import mongomock
        client = mongomock.MongoClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock not installed")


# =============================================================================
# Encounter Fixtures
# =============================================================================

@pytest.fixture
def encounter_doc():
    """
    Factory for a valid encounter document as stored in MongoDB.

    Returns a fresh dict on every call since pymongo mutates inserted dicts.
    """
    def _make(**overrides) -> dict:
        doc = {
            "fhirId": "592301",
            "fullUrl": "http://hapi.fhir.org/baseR4/Encounter/592301",
            "status": "finished",
            "class": "AMB",
            "period": {
                "start": datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
                "end": datetime(2024, 3, 1, 10, 15, tzinfo=timezone.utc),
            },
            "practitionerId": ObjectId("507f1f77bcf86cd799439011"),
            "patientId": ObjectId("507f1f77bcf86cd799439022"),
        }
        doc.update(overrides)
        return doc

    return _make
