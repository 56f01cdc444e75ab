from typing import List, Optional

from fleet.repositories.base import BaseRepository
from fleet.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate


class VehicleRepository(BaseRepository[Vehicle]):
    table = "vehicles"
    entity_type = "vehicle"
    record_type = Vehicle
    create_type = VehicleCreate
    update_type = VehicleUpdate

    def get_by_status(self, status: str) -> List[Vehicle]:
        return self._scan(status=status)

    def get_by_plate(self, plate: str) -> Optional[Vehicle]:
        # Plates are expected to be unique but the table does not enforce it
        matches = self._scan(licensePlate=plate)
        return matches[0] if matches else None

    def get_by_barcode(self, barcode: str) -> Optional[Vehicle]:
        matches = self._scan(barcode=barcode)
        return matches[0] if matches else None
