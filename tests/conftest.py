"""
Pytest configuration and shared fixtures for the service registry store tests
"""
import os
import sys
import tempfile
from pathlib import Path

import mongomock
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep test log files out of the working tree
os.environ.setdefault('LOGS_DIR', tempfile.mkdtemp(prefix='service_registry_logs_'))

COLLECTION_NAME = 'test-service-registry'


@pytest.fixture
def mongo_client():
    """In-process MongoDB stand-in"""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def database(mongo_client):
    return mongo_client['cas_test']


@pytest.fixture
def store(database):
    from services.service_registry_store import ServiceRegistryStore
    return ServiceRegistryStore(database, COLLECTION_NAME, drop_collection=True)


@pytest.fixture
def make_service():
    """Factory for RegisteredService records with an unassigned id"""
    from services.registered_service import RegisteredService

    def _make(service_id='https://app.example.com/.*', name='Example App', **kwargs):
        return RegisteredService(service_id=service_id, name=name, **kwargs)

    return _make
