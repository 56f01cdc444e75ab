from typing import List

from fleet.repositories.base import BaseRepository
from fleet.schemas.maintenance import MaintenanceCreate, MaintenanceRecord, MaintenanceUpdate

VEHICLE_INDEX = "vehicleId-index"


class MaintenanceRepository(BaseRepository[MaintenanceRecord]):
    """Maintenance records. ``vehicleId`` is not a foreign key: records outlive their vehicle."""

    table = "maintenance"
    entity_type = "maintenance"
    record_type = MaintenanceRecord
    create_type = MaintenanceCreate
    update_type = MaintenanceUpdate

    def get_by_vehicle(self, vehicle_id: str) -> List[MaintenanceRecord]:
        return self._to_records(self.gateway.query(self.table, VEHICLE_INDEX, vehicle_id))

    def get_by_status(self, status: str) -> List[MaintenanceRecord]:
        return self._scan(status=status)
