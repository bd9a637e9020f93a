from typing import List

from pydantic import BaseModel

from workboard.dto.audit_log_dto import AuditLogDTO


class GetAuditLogsResponse(BaseModel):
    logs: List[AuditLogDTO] = []
    total: int = 0
