"""Generic table gateway.

One implementation serves every table: records are JSON documents keyed by
``id``. Scans always return the complete result set; the tables are
fleet-sized, so filtering happens in Python after the read.
"""
import copy
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet.core.exceptions import (
    GatewayError,
    ItemNotFoundError,
    UnknownIndexError,
    UnknownTableError,
)
from fleet.models import TABLES

logger = logging.getLogger(__name__)

Item = Dict[str, Any]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class TableGateway:
    """put/get/update/delete/scan/query over the named tables."""

    def __init__(self, db: Session, clock: Callable[[], str] = utc_now_iso):
        self.db = db
        self.clock = clock

    def _model(self, table: str):
        model = TABLES.get(table)
        if model is None:
            raise UnknownTableError(table)
        return model

    def _sync_indexes(self, row, item: Item) -> None:
        for column, field in row.indexes.values():
            setattr(row, column, item.get(field))

    def _commit(self, action: str, table: str, key: Optional[str]) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"{action} failed on {table}/{key}: {e}")
            self.db.rollback()
            raise GatewayError(f"{action} failed on {table}: {e}") from e

    def _row(self, model, table: str, key: str):
        try:
            return self.db.get(model, key)
        except SQLAlchemyError as e:
            logger.error(f"Read failed on {table}/{key}: {e}")
            self.db.rollback()
            raise GatewayError(f"Read failed on {table}: {e}") from e

    def _read(self, table: str, statement):
        try:
            return self.db.execute(statement).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Read failed on {table}: {e}")
            self.db.rollback()
            raise GatewayError(f"Read failed on {table}: {e}") from e

    def put(self, table: str, item: Item) -> Item:
        """Insert or fully replace the record at item["id"]. Last write wins."""
        model = self._model(table)
        key = item.get("id")
        if not key:
            raise ValueError("Item must have an id")

        stored = copy.deepcopy(item)
        row = self._row(model, table, key)
        if row is None:
            row = model(id=key, data=stored)
            self.db.add(row)
        else:
            row.data = stored
        self._sync_indexes(row, stored)
        self._commit("put", table, key)
        logger.debug(f"put {table}/{key}")
        return copy.deepcopy(stored)

    def get(self, table: str, key: str) -> Optional[Item]:
        """Record for key, or None when absent."""
        model = self._model(table)
        row = self._row(model, table, key)
        if row is None:
            return None
        return copy.deepcopy(row.data)

    def update(self, table: str, key: str, changes: Item) -> Item:
        """Merge changes into an existing record and stamp updatedAt.

        Raises ItemNotFoundError when the key does not exist.
        """
        model = self._model(table)
        row = self._row(model, table, key)
        if row is None:
            raise ItemNotFoundError(table, key)

        merged = copy.deepcopy(row.data)
        for field, value in changes.items():
            if field == "id":
                continue
            merged[field] = copy.deepcopy(value)

        now = self.clock()
        previous = row.data.get("updatedAt")
        merged["updatedAt"] = max(now, previous) if previous else now

        row.data = merged
        self._sync_indexes(row, merged)
        self._commit("update", table, key)
        logger.debug(f"update {table}/{key}: {sorted(changes)}")
        return copy.deepcopy(merged)

    def delete(self, table: str, key: str) -> bool:
        """Remove the record. Deleting an absent key is not an error."""
        model = self._model(table)
        row = self._row(model, table, key)
        if row is None:
            return False
        self.db.delete(row)
        self._commit("delete", table, key)
        logger.debug(f"delete {table}/{key}")
        return True

    def scan(
        self,
        table: str,
        filters: Optional[Item] = None,
        where: Optional[Callable[[Item], bool]] = None,
    ) -> List[Item]:
        """Every record in the table, optionally filtered.

        ``filters`` matches fields by equality; ``where`` is an arbitrary
        predicate over the record. The order of the result is unspecified.
        """
        model = self._model(table)
        items = [copy.deepcopy(row.data) for row in self._read(table, select(model))]
        if filters:
            items = [
                item for item in items
                if all(item.get(field) == value for field, value in filters.items())
            ]
        if where is not None:
            items = [item for item in items if where(item)]
        return items

    def query(self, table: str, index_name: str, value: Any) -> List[Item]:
        """Records whose indexed field equals value."""
        model = self._model(table)
        if index_name not in model.indexes:
            raise UnknownIndexError(table, index_name)
        column, _ = model.indexes[index_name]
        rows = self._read(table, select(model).where(getattr(model, column) == value))
        return [copy.deepcopy(row.data) for row in rows]
