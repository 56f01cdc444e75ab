from fleet.models.vehicle import VehicleTable
from fleet.models.maintenance import MaintenanceTable
from fleet.models.report import ReportTable
from fleet.models.calendar import CalendarTable
from fleet.models.history import HistoryTable
from fleet.models.user import UserTable

# Logical table name -> model
TABLES = {
    "vehicles": VehicleTable,
    "maintenance": MaintenanceTable,
    "reports": ReportTable,
    "users": UserTable,
    "calendar": CalendarTable,
    "history": HistoryTable,
}

__all__ = [
    "VehicleTable", "MaintenanceTable", "ReportTable",
    "CalendarTable", "HistoryTable", "UserTable", "TABLES",
]
