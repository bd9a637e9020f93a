import csv
import io
import json
from typing import Iterable

from workboard.constants.audit import CSV_EXPORT_HEADERS
from workboard.models.audit_log import AuditLogModel


def export_audit_logs_csv(logs: Iterable[AuditLogModel]) -> str:
    """Render audit records as CSV, one row per record, in the order given."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_EXPORT_HEADERS)
    for log in logs:
        writer.writerow(
            [
                log.timestamp.isoformat(),
                f"{log.userName} ({log.userEmail})",
                log.action,
                log.collectionName,
                log.docId,
                json.dumps(log.changes, default=str),
            ]
        )
    return buffer.getvalue()
