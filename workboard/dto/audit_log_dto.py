from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from workboard.constants.audit import AuditAction


class AuditLogDTO(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    timestamp: datetime
    userId: str
    userEmail: str
    userName: str
    action: AuditAction
    collectionName: str
    docId: str
    changes: Dict[str, Any] = {}
    metadata: Dict[str, Any] | None = None
