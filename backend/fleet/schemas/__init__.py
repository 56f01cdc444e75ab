from fleet.schemas.vehicle import VehicleCreate, VehicleUpdate, Vehicle
from fleet.schemas.maintenance import MaintenanceCreate, MaintenanceUpdate, MaintenanceRecord
from fleet.schemas.report import ReportCreate, ReportUpdate, PublicReport
from fleet.schemas.calendar import CalendarEventCreate, CalendarEventUpdate, CalendarEvent
from fleet.schemas.history import HistoryCreate, HistoryRecord
from fleet.schemas.user import UserCreate, UserUpdate, User, StoredUser

__all__ = [
    "VehicleCreate", "VehicleUpdate", "Vehicle",
    "MaintenanceCreate", "MaintenanceUpdate", "MaintenanceRecord",
    "ReportCreate", "ReportUpdate", "PublicReport",
    "CalendarEventCreate", "CalendarEventUpdate", "CalendarEvent",
    "HistoryCreate", "HistoryRecord",
    "UserCreate", "UserUpdate", "User", "StoredUser",
]
