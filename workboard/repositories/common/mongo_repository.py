from abc import ABC

from pymongo.client_session import ClientSession
from pymongo.collection import Collection

from workboard_project.db.config import DatabaseManager


class MongoRepository(ABC):
    collection_name: str

    @classmethod
    def _get_database_manager(cls) -> DatabaseManager:
        return DatabaseManager()

    @classmethod
    def get_client(cls):
        return cls._get_database_manager().get_client()

    @classmethod
    def get_database(cls):
        return cls._get_database_manager().get_database()

    @classmethod
    def get_collection(cls) -> Collection:
        return cls._get_database_manager().get_collection(cls.collection_name)

    @classmethod
    def start_session(cls) -> ClientSession:
        return cls.get_client().start_session()
