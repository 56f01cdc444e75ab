from typing import Any, Dict, Literal, Optional

from fleet.schemas.base import Document

EntityType = Literal["vehicle", "maintenance", "report", "calendar", "user"]
HistoryAction = Literal["created", "updated", "deleted"]


class HistoryCreate(Document):
    entity_type: EntityType
    entity_id: str
    action: HistoryAction
    changes: Dict[str, Any] = {}
    performed_by: Optional[str] = None


class HistoryRecord(HistoryCreate):
    id: str
    timestamp: str
