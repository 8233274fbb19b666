"""
Centralized configuration management for the service registry store.
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # MongoDB
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
    MONGO_DB: str = os.getenv("MONGO_DB", "cas")
    MONGO_SERVICE_REGISTRY_COLLECTION: str = os.getenv(
        "MONGO_SERVICE_REGISTRY_COLLECTION", "cas-service-registry"
    )
    MONGO_DROP_COLLECTION: bool = os.getenv("MONGO_DROP_COLLECTION", "False").lower() == "true"
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "30000"))

    # Logging
    LOGS_DIR: str = os.getenv("LOGS_DIR", "./logs")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls):
        """Validate critical configuration."""
        errors = []

        if not cls.MONGO_DB:
            errors.append("MONGO_DB is required")

        if not cls.MONGO_SERVICE_REGISTRY_COLLECTION:
            errors.append("MONGO_SERVICE_REGISTRY_COLLECTION is required")

        if cls.MONGO_TIMEOUT_MS < 1:
            errors.append("MONGO_TIMEOUT_MS must be >= 1")

        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"LOG_LEVEL must be a standard logging level, got {cls.LOG_LEVEL}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

    @classmethod
    def get_store_config(cls) -> dict:
        """Get the settings the service registry store is built from."""
        return {
            "mongo_uri": cls.MONGO_URI,
            "mongo_db": cls.MONGO_DB,
            "collection_name": cls.MONGO_SERVICE_REGISTRY_COLLECTION,
            "drop_collection": cls.MONGO_DROP_COLLECTION,
            "timeout_ms": cls.MONGO_TIMEOUT_MS,
        }


# Validate on import
Config.validate()
