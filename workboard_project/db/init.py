import logging
import time

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from workboard.models.audit_log import AuditLogModel
from workboard.models.goal import GoalModel
from workboard.models.task import TaskModel
from workboard.models.todo import ToDoItemModel, ToDoListModel, ToDoModel
from workboard_project.db.config import DatabaseManager

logger = logging.getLogger(__name__)

INDEXES = {
    TaskModel.collection_name: [
        [("assigneeId", ASCENDING), ("status", ASCENDING)],
        [("dueDate", ASCENDING)],
        [("goalId", ASCENDING)],
    ],
    GoalModel.collection_name: [
        [("targetDate", ASCENDING)],
    ],
    ToDoModel.collection_name: [
        [("assigneeId", ASCENDING), ("category", ASCENDING)],
    ],
    ToDoListModel.collection_name: [
        [("createdBy", ASCENDING)],
        [("sharedWith", ASCENDING)],
    ],
    ToDoItemModel.collection_name: [
        [("listId", ASCENDING), ("order", ASCENDING)],
    ],
    AuditLogModel.collection_name: [
        [("timestamp", DESCENDING)],
        [("userId", ASCENDING), ("timestamp", DESCENDING)],
        [("collectionName", ASCENDING), ("timestamp", DESCENDING)],
    ],
}


def ensure_indexes() -> None:
    db_manager = DatabaseManager()
    for collection_name, indexes in INDEXES.items():
        collection = db_manager.get_collection(collection_name)
        for keys in indexes:
            collection.create_index(keys)
        logger.info(f"Ensured {len(indexes)} index(es) on {collection_name}")


def initialize_database(max_retries=5, retry_delay=2):
    """
    Wait for MongoDB to accept connections, then create the indexes.
    Includes retry logic for Docker environments.
    """
    db_manager = DatabaseManager()

    for attempt in range(max_retries):
        if db_manager.check_database_health():
            break
        if attempt < max_retries - 1:
            logger.warning(f"Database health check failed, attempt {attempt + 1}. Retrying in {retry_delay} seconds...")
            time.sleep(retry_delay)
        else:
            logger.error("All database connection attempts failed")
            return False

    try:
        ensure_indexes()
    except PyMongoError as e:
        logger.error(f"Error initializing database: {str(e)}")
        return False

    logger.info("Database initialization completed successfully")
    return True
