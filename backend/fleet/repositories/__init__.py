from fleet.repositories.vehicle import VehicleRepository
from fleet.repositories.maintenance import MaintenanceRepository
from fleet.repositories.report import ReportRepository
from fleet.repositories.calendar import CalendarRepository
from fleet.repositories.history import HistoryRepository
from fleet.repositories.user import UserRepository

__all__ = [
    "VehicleRepository", "MaintenanceRepository", "ReportRepository",
    "CalendarRepository", "HistoryRepository", "UserRepository",
]
