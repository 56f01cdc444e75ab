from typing import List

from fleet.repositories.base import BaseRepository
from fleet.schemas.calendar import CalendarEvent, CalendarEventCreate, CalendarEventUpdate


class CalendarRepository(BaseRepository[CalendarEvent]):
    table = "calendar"
    entity_type = "calendar"
    record_type = CalendarEvent
    create_type = CalendarEventCreate
    update_type = CalendarEventUpdate

    def get_by_vehicle(self, vehicle_id: str) -> List[CalendarEvent]:
        return self._scan(vehicleId=vehicle_id)

    def get_by_date(self, date: str) -> List[CalendarEvent]:
        """Events on a day; ``date`` is YYYY-MM-DD, stored dates may carry a time."""
        return self._to_records(
            self.gateway.scan(self.table, where=lambda item: item.get("date", "")[:10] == date)
        )
