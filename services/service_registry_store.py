# services/service_registry_store.py
"""
MongoDB storage backend for the service registry.

The store owns one named collection. On construction it makes sure that
collection exists, dropping it first when asked to. Every operation maps onto
a single pymongo call; driver errors reach the caller unchanged.
"""

from typing import List, Optional, Union

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import CollectionInvalid

from config import Config
from services.registered_service import INITIAL_IDENTIFIER_VALUE, RegisteredService
from services.service_registry_dao import ServiceRegistryDao
from utils.logger import get_logger
from utils.mongo_helper import get_mongo_client, get_mongo_database

logger = get_logger("ServiceRegistryStore")


class ServiceRegistryStore(ServiceRegistryDao):
    """Service registry backed by a MongoDB collection."""

    def __init__(
        self,
        database: Optional[Database],
        collection_name: str = Config.MONGO_SERVICE_REGISTRY_COLLECTION,
        drop_collection: bool = False,
    ):
        if database is None:
            raise ValueError("A MongoDB database handle is required")
        if not collection_name:
            raise ValueError("collection_name must not be empty")

        self.database = database
        self.collection_name = collection_name
        self.drop_collection = drop_collection

        self.initialize_collection()

    @classmethod
    def from_config(cls, client: Optional[MongoClient] = None, drop_collection: Optional[bool] = None):
        """
        Build a store from Config.

        Args:
            client: Connected client to reuse. If None, one is created from MONGO_URI.
            drop_collection: Overrides MONGO_DROP_COLLECTION when given.

        Returns:
            ServiceRegistryStore instance.
        """
        settings = Config.get_store_config()
        if client is None:
            client = get_mongo_client(settings["mongo_uri"], timeout_ms=settings["timeout_ms"])
        if drop_collection is None:
            drop_collection = settings["drop_collection"]

        database = get_mongo_database(client, settings["mongo_db"])
        return cls(database, settings["collection_name"], drop_collection)

    def initialize_collection(self):
        """
        Make sure the collection exists, dropping it first if drop_collection is set.
        """
        if self.drop_collection:
            logger.warning(f"Dropping database collection: [{self.collection_name}]")
            self.database.drop_collection(self.collection_name)

        if self.collection_name not in self.database.list_collection_names():
            logger.info(f"Creating database collection: [{self.collection_name}]")
            try:
                self.database.create_collection(self.collection_name)
            except CollectionInvalid:
                logger.debug(f"Collection [{self.collection_name}] was created concurrently")

        self.collection = self.database[self.collection_name]

    def save(self, service: RegisteredService) -> RegisteredService:
        """
        Upsert a service and return it as read back from the collection.

        A service still carrying the sentinel id is given one derived from its
        content first; the caller's object is updated with that id.
        """
        if service.id == INITIAL_IDENTIFIER_VALUE:
            service.id = service.content_hash()

        self.collection.replace_one({"_id": service.id}, service.to_document(), upsert=True)
        logger.debug(f"Saved registered service: [{service}]")
        return self.find_service_by_id(service.id)

    def delete(self, service: RegisteredService) -> bool:
        result = self.collection.delete_one({"_id": service.id})
        if result.deleted_count:
            logger.debug(f"Removed registered service: [{service}]")
            return True
        return False

    def find_service_by_id(self, service_id: Union[int, str]) -> Optional[RegisteredService]:
        """
        Find a service by numeric id.

        A string argument is treated as a service identifier pattern, see
        find_service_matching.
        """
        if isinstance(service_id, str):
            return self.find_service_matching(service_id)
        return self._find_one({"_id": service_id})

    def find_service_by_service_id(self, service_id: str) -> Optional[RegisteredService]:
        """Exact, case-sensitive lookup on the service identifier."""
        return self._find_one({"service_id": service_id})

    def find_service_matching(self, pattern: str) -> Optional[RegisteredService]:
        """First service whose identifier matches the regex pattern, ignoring case."""
        return self._find_one({"service_id": {"$regex": pattern, "$options": "i"}})

    def load(self) -> List[RegisteredService]:
        return [RegisteredService.from_document(document) for document in self.collection.find()]

    def size(self) -> int:
        return self.collection.count_documents({})

    def _find_one(self, query: dict) -> Optional[RegisteredService]:
        document = self.collection.find_one(query)
        if document is None:
            return None
        return RegisteredService.from_document(document)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(collection={self.collection_name!r})"

    __str__ = __repr__
