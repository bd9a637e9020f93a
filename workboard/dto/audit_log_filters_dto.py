from pydantic import BaseModel


class AuditLogFilters(BaseModel):
    action: str | None = None
    collection_name: str | None = None
    user_id: str | None = None
    date_range: str | None = None
    search: str | None = None
    limit: int | None = None
