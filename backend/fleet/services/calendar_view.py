"""Unified calendar of maintenance records and calendar events."""
from typing import Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel

from fleet.schemas.calendar import CalendarEvent
from fleet.schemas.maintenance import MaintenanceRecord
from fleet.schemas.vehicle import Vehicle

UNKNOWN_VEHICLE = "N/A"


class CalendarEntry(BaseModel):
    id: str
    source: Literal["maintenance", "calendar"]
    title: str
    date: str  # YYYY-MM-DD
    time: Optional[str] = None
    type: str
    vehicle_id: Optional[str] = None
    vehicle_name: str = UNKNOWN_VEHICLE
    description: Optional[str] = None


def _day(value: str) -> str:
    return value[:10]


def _time(value: str) -> Optional[str]:
    # "2024-05-01T09:30:00.000Z" -> "09:30"
    if len(value) > 10 and value[10] == "T":
        return value[11:16]
    return None


def calendar_view(
    records: Sequence[MaintenanceRecord],
    events: Sequence[CalendarEvent],
    vehicles: Sequence[Vehicle],
) -> Dict[str, List[CalendarEntry]]:
    """Group maintenance records and calendar events by day.

    Vehicle names come from an id lookup in ``vehicles``; a record whose
    vehicle is gone falls back to the plate stored on the record.
    """
    names = {v.id: v.license_plate for v in vehicles}
    view: Dict[str, List[CalendarEntry]] = {}

    for record in records:
        entry = CalendarEntry(
            id=record.id,
            source="maintenance",
            title=record.service_type,
            date=_day(record.date),
            time=_time(record.date),
            type="maintenance",
            vehicle_id=record.vehicle_id,
            vehicle_name=names.get(record.vehicle_id) or record.vehicle_plate_number or UNKNOWN_VEHICLE,
            description=record.notes or record.description,
        )
        view.setdefault(entry.date, []).append(entry)

    for event in events:
        entry = CalendarEntry(
            id=event.id,
            source="calendar",
            title=event.title,
            date=_day(event.date),
            time=event.time or _time(event.date),
            type=event.type,
            vehicle_id=event.vehicle_id,
            vehicle_name=names.get(event.vehicle_id, UNKNOWN_VEHICLE),
            description=event.description,
        )
        view.setdefault(entry.date, []).append(entry)

    return view


def entries_for_day(view: Dict[str, List[CalendarEntry]], day: str) -> List[CalendarEntry]:
    return view.get(day, [])


def entries_for_month(view: Dict[str, List[CalendarEntry]], year: int, month: int) -> Dict[str, List[CalendarEntry]]:
    prefix = f"{year:04d}-{month:02d}"
    return {day: entries for day, entries in sorted(view.items()) if day.startswith(prefix)}
