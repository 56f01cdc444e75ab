from pydantic import Field
from typing import List, Literal, Optional

from fleet.schemas.base import Document, Patch

MaintenanceStatus = Literal["scheduled", "in-progress", "completed"]


class MaintenanceTask(Document):
    id: str
    description: str
    completed: bool = False


class MaintenancePhoto(Document):
    id: str
    filename: str
    url: Optional[str] = None
    upload_date: Optional[str] = None
    description: Optional[str] = None


class MaintenanceBase(Document):
    vehicle_id: str = Field(min_length=1)
    service_type: str = Field(min_length=1)
    date: str = Field(min_length=1)  # ISO date


class MaintenanceCreate(MaintenanceBase):
    vehicle_plate_number: Optional[str] = None
    description: Optional[str] = None
    cost: Optional[float] = Field(default=None, ge=0)
    mechanic: Optional[str] = None
    status: MaintenanceStatus = "scheduled"
    notes: Optional[str] = None
    tasks: List[MaintenanceTask] = []
    receipt_image: Optional[str] = None
    photos: List[MaintenancePhoto] = []


class MaintenanceUpdate(Patch):
    not_null = ("vehicle_id", "service_type", "date", "status", "tasks", "photos")

    vehicle_id: Optional[str] = Field(default=None, min_length=1)
    vehicle_plate_number: Optional[str] = None
    service_type: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    cost: Optional[float] = Field(default=None, ge=0)
    mechanic: Optional[str] = None
    status: Optional[MaintenanceStatus] = None
    notes: Optional[str] = None
    tasks: Optional[List[MaintenanceTask]] = None
    receipt_image: Optional[str] = None
    photos: Optional[List[MaintenancePhoto]] = None


class MaintenanceRecord(MaintenanceCreate):
    id: str
    created_at: str
    updated_at: str
