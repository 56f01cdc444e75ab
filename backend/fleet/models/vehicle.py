from fleet.core.database import Base
from fleet.models.document import DocumentMixin, table_name


class VehicleTable(DocumentMixin, Base):
    __tablename__ = table_name("vehicles")
