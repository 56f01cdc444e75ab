"""
Typed repositories over the table gateway.

Each entity repository assigns identifiers and timestamps, validates input
through its pydantic schemas and hands plain documents to the gateway.
A missing record is reported as ``None`` (get/update) or ``False`` (delete),
never as an exception.
"""
import logging
import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from fleet.core.exceptions import ItemNotFoundError
from fleet.core.gateway import TableGateway

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)


def new_id() -> str:
    return str(uuid.uuid4())


class ReadRepository(Generic[RecordType]):
    """Lookups shared by every entity table."""

    table: str
    record_type: Type[RecordType]

    def __init__(self, gateway: TableGateway):
        self.gateway = gateway

    def _to_record(self, item: Optional[Dict[str, Any]]) -> Optional[RecordType]:
        if item is None:
            return None
        return self.record_type.model_validate(item)

    def _to_records(self, items: List[Dict[str, Any]]) -> List[RecordType]:
        return [self.record_type.model_validate(item) for item in items]

    def _scan(self, **filters) -> List[RecordType]:
        return self._to_records(self.gateway.scan(self.table, filters=filters or None))

    def get(self, id: str) -> Optional[RecordType]:
        """Get a single record by id."""
        return self._to_record(self.gateway.get(self.table, id))

    def get_all(self) -> List[RecordType]:
        """Every record in the table, unordered."""
        return self._to_records(self.gateway.scan(self.table))


class BaseRepository(ReadRepository[RecordType]):
    """
    Create, update and delete on top of the shared lookups.

    Attributes:
        entity_type: Name written to history records.
        create_type: Schema that validates new records.
        update_type: Patch schema; unknown fields are rejected.
        created_field: Name of the creation timestamp in the stored document.
    """

    entity_type: str
    create_type: Type[BaseModel]
    update_type: Type[BaseModel]
    created_field = "createdAt"

    def __init__(self, gateway: TableGateway, history=None, performed_by: Optional[str] = None):
        super().__init__(gateway)
        self.history = history
        self.performed_by = performed_by

    def _new_item(self, data: BaseModel) -> Dict[str, Any]:
        item = data.to_item()
        now = self.gateway.clock()
        item["id"] = new_id()
        item[self.created_field] = now
        item["updatedAt"] = now
        return item

    def _audit(self, action: str, id: str, changes: Dict[str, Any]) -> None:
        if self.history is None:
            return
        self.history.record(
            entity_type=self.entity_type,
            entity_id=id,
            action=action,
            changes=changes,
            performed_by=self.performed_by,
        )

    def create(self, fields: Union[BaseModel, Dict[str, Any]]) -> RecordType:
        """Validate, assign id and timestamps, and store a new record."""
        data = self.create_type.model_validate(fields)
        item = self.gateway.put(self.table, self._new_item(data))
        logger.info(f"Created {self.entity_type} {item['id']}")
        self._audit("created", item["id"], item)
        return self._to_record(item)

    def update(self, id: str, patch: Union[BaseModel, Dict[str, Any]]) -> Optional[RecordType]:
        """Apply a partial update. Returns None when the record does not exist.

        The merged record is validated before anything is written, so a
        rejected patch leaves the stored record unchanged.
        """
        changes = self.update_type.model_validate(patch).changes()
        current = self.gateway.get(self.table, id)
        if current is None:
            return None
        self.record_type.model_validate({**current, **changes})
        try:
            item = self.gateway.update(self.table, id, changes)
        except ItemNotFoundError:
            return None
        self._audit("updated", id, {**changes, "updatedAt": item["updatedAt"]})
        return self._to_record(item)

    def delete(self, id: str) -> bool:
        """Delete a record. Returns False when it was already absent."""
        snapshot = self.gateway.get(self.table, id) if self.history is not None else None
        deleted = self.gateway.delete(self.table, id)
        if deleted:
            logger.info(f"Deleted {self.entity_type} {id}")
            self._audit("deleted", id, snapshot or {})
        return deleted
