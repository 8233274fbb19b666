"""
Service Registry Services Package.
Contains the RegisteredService model and its MongoDB storage backend.
"""

from .registered_service import INITIAL_IDENTIFIER_VALUE, RegisteredService
from .service_registry_dao import ServiceRegistryDao
from .service_registry_store import ServiceRegistryStore

__all__ = [
    'INITIAL_IDENTIFIER_VALUE',
    'RegisteredService',
    'ServiceRegistryDao',
    'ServiceRegistryStore',
]
