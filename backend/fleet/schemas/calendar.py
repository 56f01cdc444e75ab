from pydantic import Field
from typing import Literal, Optional

from fleet.schemas.base import Document, Patch

EventType = Literal["maintenance", "inspection", "meeting", "other"]


class Recurrence(Document):
    # Stored as given; nothing expands recurring events
    type: Literal["daily", "weekly", "monthly", "yearly"]
    interval: int = Field(default=1, ge=1)
    end_date: Optional[str] = None


class Alert(Document):
    # Stored as given; nothing fires alerts
    enabled: bool = False
    lead_time: Optional[str] = None


class CalendarEventCreate(Document):
    title: str = Field(min_length=1)
    date: str = Field(min_length=1)  # ISO date or datetime
    time: Optional[str] = None
    type: EventType = "other"
    vehicle_id: Optional[str] = None
    description: Optional[str] = None
    recurrence: Optional[Recurrence] = None
    alert: Optional[Alert] = None


class CalendarEventUpdate(Patch):
    not_null = ("title", "date", "type")

    title: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, min_length=1)
    time: Optional[str] = None
    type: Optional[EventType] = None
    vehicle_id: Optional[str] = None
    description: Optional[str] = None
    recurrence: Optional[Recurrence] = None
    alert: Optional[Alert] = None


class CalendarEvent(CalendarEventCreate):
    id: str
    created_at: str
    updated_at: str
