from sqlalchemy import Column, String, JSON
from sqlalchemy.dialects.postgresql import JSONB

from fleet.core.config import settings


def table_name(name: str) -> str:
    return f"{settings.TABLE_PREFIX}{name}"


class DocumentMixin:
    """A schemaless record keyed by a single string id.

    The whole record lives in ``data``; the ``id`` column mirrors
    ``data["id"]``. Tables that need a secondary index add an indexed
    column that the gateway keeps in sync with the document.
    """

    id = Column(String(64), primary_key=True)
    data = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)

    # Secondary indexes: index name -> (column attribute, document field)
    indexes = {}
