import logging
from typing import Any, Dict, List

from django.conf import settings

from workboard.constants.audit import AUTH_COLLECTION, BULK_OPERATION_DOC_ID, AuditAction
from workboard.dto.audit_actor_dto import AuditActor
from workboard.models.audit_log import AuditLogModel, AuditMetadataModel
from workboard.repositories.audit_log_repository import AuditLogRepository
from workboard.utils.change_diff import calculate_changes, sanitize_data
from workboard.utils.session import get_process_session_id

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Server/Build Environment"


class AuditService:
    """
    Best-effort writer for the audit trail.

    Every public method returns the stored record or ``None``. Failures while writing are
    logged and swallowed so that auditing never breaks the mutation it describes.
    """

    @classmethod
    def log_create(
        cls,
        actor: AuditActor | None,
        collection_name: str,
        doc_id: str,
        new_data: Dict[str, Any],
        metadata: Dict[str, Any] | None = None,
    ) -> AuditLogModel | None:
        return cls._create_log(
            actor,
            action=AuditAction.CREATE,
            collection_name=collection_name,
            doc_id=doc_id,
            changes=sanitize_data(new_data),
            metadata=metadata,
        )

    @classmethod
    def log_update(
        cls,
        actor: AuditActor | None,
        collection_name: str,
        doc_id: str,
        previous_data: Dict[str, Any],
        new_data: Dict[str, Any],
        metadata: Dict[str, Any] | None = None,
    ) -> AuditLogModel | None:
        changes = calculate_changes(previous_data, new_data)
        if not changes:
            logger.debug(f"No changes detected for {collection_name}/{doc_id}, skipping audit log")
            return None

        return cls._create_log(
            actor,
            action=AuditAction.UPDATE,
            collection_name=collection_name,
            doc_id=doc_id,
            changes=changes,
            metadata={
                **(metadata or {}),
                "previousValues": sanitize_data(previous_data),
                "newValues": sanitize_data(new_data),
            },
        )

    @classmethod
    def log_delete(
        cls,
        actor: AuditActor | None,
        collection_name: str,
        doc_id: str,
        deleted_data: Dict[str, Any],
        metadata: Dict[str, Any] | None = None,
    ) -> AuditLogModel | None:
        return cls._create_log(
            actor,
            action=AuditAction.DELETE,
            collection_name=collection_name,
            doc_id=doc_id,
            changes=sanitize_data(deleted_data),
            metadata=metadata,
        )

    @classmethod
    def log_auth(
        cls,
        actor: AuditActor | None,
        action: AuditAction,
        details: Dict[str, Any] | None = None,
        metadata: Dict[str, Any] | None = None,
    ) -> AuditLogModel | None:
        action_value = action.value if isinstance(action, AuditAction) else action
        return cls._create_log(
            actor,
            action=AuditAction(action_value),
            collection_name=AUTH_COLLECTION,
            doc_id=actor.id if actor else "unknown",
            changes={"operation": action_value, "details": sanitize_data(details)},
            metadata=metadata,
        )

    @classmethod
    def log_bulk_operation(
        cls,
        actor: AuditActor | None,
        operation: str,
        collection_name: str,
        affected_doc_ids: List[str],
        details: Dict[str, Any],
        metadata: Dict[str, Any] | None = None,
    ) -> AuditLogModel | None:
        affected = [str(doc_id) for doc_id in affected_doc_ids]
        return cls._create_log(
            actor,
            action=AuditAction.UPDATE,
            collection_name=collection_name,
            doc_id=BULK_OPERATION_DOC_ID,
            changes={
                "operation": f"BULK_{operation.upper()}",
                "affectedDocuments": affected,
                "documentCount": len(affected),
                "details": sanitize_data(details),
            },
            metadata=metadata,
        )

    @classmethod
    def _create_log(
        cls,
        actor: AuditActor | None,
        action: AuditAction,
        collection_name: str,
        doc_id: str,
        changes: Dict[str, Any],
        metadata: Dict[str, Any] | None,
    ) -> AuditLogModel | None:
        if actor is None:
            logger.warning(f"No actor supplied for {action.value} on {collection_name}/{doc_id}, skipping audit log")
            return None

        try:
            audit_log = AuditLogModel(
                userId=actor.id,
                userEmail=actor.email,
                userName=actor.name,
                action=action,
                collectionName=collection_name,
                docId=str(doc_id),
                changes=changes,
                metadata=AuditMetadataModel(
                    **{
                        "userAgent": actor.user_agent or cls._get_default_user_agent(),
                        "sessionId": actor.session_id or get_process_session_id(),
                        "ipAddress": actor.ip_address,
                        **(metadata or {}),
                    }
                ),
            )
            return AuditLogRepository.create(audit_log)
        except Exception:
            logger.exception(f"Failed to create audit log for {action.value} on {collection_name}/{doc_id}")
            return None

    @classmethod
    def _get_default_user_agent(cls) -> str:
        return getattr(settings, "AUDIT_LOG", {}).get("DEFAULT_USER_AGENT", DEFAULT_USER_AGENT)
