from typing import Any, Dict, List, Optional

from fleet.repositories.base import ReadRepository, new_id
from fleet.schemas.history import HistoryCreate, HistoryRecord


class HistoryRepository(ReadRepository[HistoryRecord]):
    """Append-only audit trail. There is no update or delete."""

    table = "history"
    record_type = HistoryRecord

    def record(
        self,
        entity_type: str,
        entity_id: str,
        action: str,
        changes: Optional[Dict[str, Any]] = None,
        performed_by: Optional[str] = None,
    ) -> HistoryRecord:
        data = HistoryCreate(
            entity_type=entity_type,
            entity_id=entity_id,
            action=action,
            changes=changes or {},
            performed_by=performed_by,
        )
        item = data.to_item()
        item["id"] = new_id()
        item["timestamp"] = self.gateway.clock()
        return self._to_record(self.gateway.put(self.table, item))

    def get_for_entity(self, entity_type: str, entity_id: Optional[str] = None) -> List[HistoryRecord]:
        filters = {"entityType": entity_type}
        if entity_id is not None:
            filters["entityId"] = entity_id
        records = self._scan(**filters)
        return sorted(records, key=lambda r: r.timestamp)
