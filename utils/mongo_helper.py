"""
MongoDB connection helper with proper SSL/TLS configuration for MongoDB Atlas.
"""

import os
import certifi
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from utils.logger import get_logger

logger = get_logger("MongoHelper")


def get_mongo_client(uri: str = None, timeout_ms: int = 30000) -> Optional[MongoClient]:
    """
    Create a MongoDB client with proper SSL/TLS configuration for MongoDB Atlas.

    Args:
        uri: MongoDB connection URI. If None, uses MONGO_URI env var.
        timeout_ms: Server selection timeout in milliseconds.

    Returns:
        MongoClient instance or None if connection fails.
    """
    uri = uri or os.getenv("MONGO_URI")

    if not uri:
        logger.warning("MONGO_URI not provided or not set in environment")
        return None

    # Check if it's a MongoDB Atlas URI (mongodb+srv://)
    is_atlas = uri.startswith("mongodb+srv://")

    options = {
        "serverSelectionTimeoutMS": timeout_ms,
        "connectTimeoutMS": timeout_ms,
        "socketTimeoutMS": timeout_ms,
    }
    if is_atlas:
        # Use certifi's CA bundle for SSL
        options.update(tlsCAFile=certifi.where(), retryWrites=True, w="majority")

    client = MongoClient(uri, **options)
    try:
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error(f"MongoDB connection failed: {e}")
        client.close()
        return None

    logger.info("Successfully connected to MongoDB")
    return client


def get_mongo_database(client: Optional[MongoClient], db_name: str = None) -> Optional[Database]:
    """
    Get a MongoDB database from a connected client.

    Args:
        client: MongoDB client (can be None).
        db_name: Database name. If None, uses MONGO_DB env var.

    Returns:
        Database handle or None if the client or name is missing.
    """
    db_name = db_name or os.getenv("MONGO_DB")

    if client is None:
        logger.debug("MongoDB client not available")
        return None

    if not db_name:
        logger.warning("MONGO_DB not provided or not set in environment")
        return None

    return client[db_name]
