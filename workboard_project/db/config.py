import logging

from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Process-wide holder of the MongoDB client.

    The client is created lazily on first use so that importing the project never opens
    a connection. Tests that point ``MONGODB_URI`` at a disposable server call ``reset()``
    to drop the cached client.
    """

    __instance = None
    _database_client: MongoClient | None = None
    _database: Database | None = None

    def __new__(cls, *args, **kwargs):
        if cls.__instance is None:
            cls.__instance = super().__new__(cls)
        return cls.__instance

    def _get_database_client(self) -> MongoClient:
        if self._database_client is None:
            self._database_client = MongoClient(settings.MONGODB_URI, tz_aware=True)
        return self._database_client

    def get_client(self) -> MongoClient:
        return self._get_database_client()

    def get_database(self) -> Database:
        if self._database is None:
            self._database = self._get_database_client()[settings.DB_NAME]
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        return self.get_database()[collection_name]

    def check_database_health(self) -> bool:
        try:
            self.get_database().command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    @classmethod
    def reset(cls):
        if cls.__instance is not None and cls.__instance._database_client is not None:
            cls.__instance._database_client.close()
        if cls.__instance is not None:
            cls.__instance._database_client = None
            cls.__instance._database = None
