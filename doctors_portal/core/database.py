from pymongo import MongoClient
from pymongo.database import Database
from typing import Optional
import logging

from .config import settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
APPOINTMENTS_COLLECTION = "appointments"
DOCTORS_COLLECTION = "doctors"


class MongoConnection:
    """Process-wide MongoDB handle.

    The client is created once at startup and closed at shutdown; requests
    share it (MongoClient is thread-safe and pools its own sockets).
    """

    def __init__(self):
        self.client: Optional[MongoClient] = None
        self.database_name: str = settings.DATABASE_NAME

    def connect(self, uri: str, database_name: str) -> None:
        if self.client is not None:
            return
        self.client = MongoClient(uri)
        self.database_name = database_name
        logger.info(f"MongoDB client created for database '{database_name}'")

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB client closed")

    def get_database(self) -> Database:
        if self.client is None:
            raise RuntimeError("MongoDB client is not connected")
        return self.client[self.database_name]


mongo = MongoConnection()

# Database dependency
def get_db() -> Database:
    """Get the shared database handle."""
    return mongo.get_database()

# Database initialization
def init_db(uri: Optional[str] = None, database_name: Optional[str] = None):
    """Connect the shared client, defaulting to the configured URI."""
    mongo.connect(uri or settings.get_mongodb_uri, database_name or settings.DATABASE_NAME)

def close_db():
    """Release the shared client."""
    mongo.close()
