from sqlalchemy import Column, String
from fleet.core.database import Base
from fleet.models.document import DocumentMixin, table_name


class MaintenanceTable(DocumentMixin, Base):
    __tablename__ = table_name("maintenance")

    # Backs the vehicleId-index; no foreign key, deleting a vehicle leaves
    # its records in place
    vehicle_id = Column(String(64), index=True)

    indexes = {"vehicleId-index": ("vehicle_id", "vehicleId")}
