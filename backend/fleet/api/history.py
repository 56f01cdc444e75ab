from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from fleet.api.deps import get_history
from fleet.repositories import HistoryRepository
from fleet.schemas.history import EntityType, HistoryRecord

router = APIRouter()


@router.get("", response_model=List[HistoryRecord])
def list_history(
    entity_type: Optional[EntityType] = Query(default=None, alias="entityType"),
    entity_id: Optional[str] = Query(default=None, alias="entityId"),
    repo: HistoryRepository = Depends(get_history),
):
    """Audit trail, oldest first."""
    if entity_type:
        return repo.get_for_entity(entity_type, entity_id)
    records = repo.get_all()
    if entity_id:
        records = [r for r in records if r.entity_id == entity_id]
    return sorted(records, key=lambda r: r.timestamp)
