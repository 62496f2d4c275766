"""
Integration test fixtures.

These tests require a running MongoDB server given by MONGO_TEST_URI.
The fhir_hca and fhir_hcb databases on that server are dropped before and
after every test.
"""
import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from fhir_init.database.registry import ALL_DB_MANIFESTS, bootstrap_databases


def _drop_fhir_databases(client: MongoClient) -> None:
    for manifest in ALL_DB_MANIFESTS:
        client.drop_database(manifest["db_name"])


@pytest.fixture
def live_mongo_client():
    """Client for the test server, skipping when none is configured or reachable."""
    uri = os.getenv("MONGO_TEST_URI")
    if not uri:
        pytest.skip("MONGO_TEST_URI not set")

    client = MongoClient(uri, serverSelectionTimeoutMS=5000)
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        pytest.skip(f"MongoDB not reachable: {e}")

    _drop_fhir_databases(client)
    yield client
    _drop_fhir_databases(client)
    client.close()


@pytest.fixture
def bootstrapped_client(live_mongo_client):
    """Test server after a full bootstrap run."""
    bootstrap_databases(live_mongo_client)
    return live_mongo_client


@pytest.fixture
def hca_encounters(bootstrapped_client):
    return bootstrapped_client["fhir_hca"]["encounters"]


@pytest.fixture
def hcb_encounters(bootstrapped_client):
    return bootstrapped_client["fhir_hcb"]["encounters"]
