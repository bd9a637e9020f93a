import json
from datetime import datetime, timedelta, timezone
from typing import List

from bson import ObjectId
from pymongo import DESCENDING

from workboard.constants.audit import AuditDateRange
from workboard.dto.audit_log_filters_dto import AuditLogFilters
from workboard.models.audit_log import AuditLogModel
from workboard.repositories.common.mongo_repository import MongoRepository


class AuditLogRepository(MongoRepository):
    """
    Append-only access to the audit trail. Records are never updated or deleted here.
    """

    collection_name = AuditLogModel.collection_name

    @classmethod
    def create(cls, audit_log: AuditLogModel) -> AuditLogModel:
        collection = cls.get_collection()
        audit_log_dict = audit_log.model_dump(by_alias=True, exclude_none=True)
        insert_result = collection.insert_one(audit_log_dict)
        audit_log.id = insert_result.inserted_id
        return audit_log

    @classmethod
    def get_by_id(cls, audit_log_id: str) -> AuditLogModel | None:
        collection = cls.get_collection()
        log = collection.find_one({"_id": ObjectId(audit_log_id)})
        return AuditLogModel(**log) if log else None

    @classmethod
    def list(cls, filters: AuditLogFilters, now: datetime | None = None) -> List[AuditLogModel]:
        collection = cls.get_collection()
        query = cls._build_query(filters, now or datetime.now(timezone.utc))
        cursor = collection.find(query).sort("timestamp", DESCENDING)

        logs = []
        for log in cursor:
            audit_log = AuditLogModel(**log)
            if filters.search and not matches_search(audit_log, filters.search):
                continue
            logs.append(audit_log)
            if filters.limit and len(logs) >= filters.limit:
                break
        return logs

    @classmethod
    def _build_query(cls, filters: AuditLogFilters, now: datetime) -> dict:
        query = {}

        if filters.action:
            query["action"] = filters.action
        if filters.collection_name:
            query["collectionName"] = filters.collection_name
        if filters.user_id:
            query["userId"] = filters.user_id

        if filters.date_range:
            start, end = get_date_window(filters.date_range, now)
            window = {"$gte": start}
            if end is not None:
                window["$lt"] = end
            query["timestamp"] = window

        return query


def matches_search(audit_log: AuditLogModel, search: str) -> bool:
    needle = search.lower()
    haystack = [
        audit_log.userName,
        audit_log.userEmail,
        audit_log.collectionName,
        audit_log.docId,
        json.dumps(audit_log.changes, default=str),
    ]
    return any(needle in value.lower() for value in haystack)


def get_date_window(date_range: str, now: datetime) -> tuple[datetime, datetime | None]:
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    if date_range == AuditDateRange.TODAY.value:
        return today, None
    if date_range == AuditDateRange.YESTERDAY.value:
        return today - timedelta(days=1), today
    if date_range == AuditDateRange.WEEK.value:
        return now - timedelta(days=7), None
    if date_range == AuditDateRange.MONTH.value:
        return now - timedelta(days=30), None
    raise ValueError(f"Unknown date range: {date_range}")
