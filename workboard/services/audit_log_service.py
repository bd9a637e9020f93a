from datetime import datetime, timezone

from workboard.constants.audit import CSV_EXPORT_FILENAME
from workboard.dto.audit_log_dto import AuditLogDTO
from workboard.dto.audit_log_filters_dto import AuditLogFilters
from workboard.dto.responses.audit_log_responses import GetAuditLogsResponse
from workboard.repositories.audit_log_repository import AuditLogRepository
from workboard.utils.audit_export import export_audit_logs_csv


class AuditLogService:
    @classmethod
    def get_audit_logs(cls, filters: AuditLogFilters) -> GetAuditLogsResponse:
        logs = [AuditLogDTO(**log.model_dump(mode="json")) for log in AuditLogRepository.list(filters)]
        return GetAuditLogsResponse(logs=logs, total=len(logs))

    @classmethod
    def export_audit_logs(cls, filters: AuditLogFilters) -> tuple[str, str]:
        """
        Returns:
            tuple[str, str]: The CSV document and its download file name
        """
        content = export_audit_logs_csv(AuditLogRepository.list(filters))
        filename = CSV_EXPORT_FILENAME.format(datetime.now(timezone.utc).strftime("%Y-%m-%d"))
        return content, filename
