"""
Service Registry Utilities Package.
"""

from .logger import get_logger, set_log_level
from .mongo_helper import get_mongo_client, get_mongo_database

__all__ = [
    'get_logger',
    'set_log_level',
    'get_mongo_client',
    'get_mongo_database',
]
