from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from fleet.core.database import get_db
from fleet.core.gateway import TableGateway
from fleet.core.security import get_optional_user
from fleet.repositories import (
    CalendarRepository,
    HistoryRepository,
    MaintenanceRepository,
    ReportRepository,
    UserRepository,
    VehicleRepository,
)


def get_gateway(db: Session = Depends(get_db)) -> TableGateway:
    return TableGateway(db)


def get_history(gateway: TableGateway = Depends(get_gateway)) -> HistoryRepository:
    return HistoryRepository(gateway)


def _performer(user: Optional[dict]) -> Optional[str]:
    return user.get("sub") if user else None


def get_vehicles(
    gateway: TableGateway = Depends(get_gateway),
    history: HistoryRepository = Depends(get_history),
    user: Optional[dict] = Depends(get_optional_user),
) -> VehicleRepository:
    return VehicleRepository(gateway, history, _performer(user))


def get_maintenance(
    gateway: TableGateway = Depends(get_gateway),
    history: HistoryRepository = Depends(get_history),
    user: Optional[dict] = Depends(get_optional_user),
) -> MaintenanceRepository:
    return MaintenanceRepository(gateway, history, _performer(user))


def get_reports(
    gateway: TableGateway = Depends(get_gateway),
    history: HistoryRepository = Depends(get_history),
    user: Optional[dict] = Depends(get_optional_user),
) -> ReportRepository:
    return ReportRepository(gateway, history, _performer(user))


def get_calendar(
    gateway: TableGateway = Depends(get_gateway),
    history: HistoryRepository = Depends(get_history),
    user: Optional[dict] = Depends(get_optional_user),
) -> CalendarRepository:
    return CalendarRepository(gateway, history, _performer(user))


def get_users(gateway: TableGateway = Depends(get_gateway)) -> UserRepository:
    return UserRepository(gateway)
