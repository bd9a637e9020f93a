from datetime import datetime, timezone
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, Field

from workboard.constants.audit import AuditAction
from workboard.models.common.document import Document


class AuditMetadataModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    userAgent: str | None = None
    sessionId: str | None = None
    ipAddress: str | None = None
    previousValues: Dict[str, Any] | None = None
    newValues: Dict[str, Any] | None = None


class AuditLogModel(Document):
    """
    Immutable record of a mutation or authentication event.

    `changes` holds a field-level diff for updates, the redacted snapshot for creates and
    deletes, and free-form details for auth and bulk entries.
    """

    collection_name: ClassVar[str] = "auditLogs"

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    userId: str
    userEmail: str
    userName: str
    action: AuditAction
    collectionName: str
    docId: str
    changes: Dict[str, Any] = Field(default_factory=dict)
    metadata: AuditMetadataModel | None = None
