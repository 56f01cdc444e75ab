"""Dashboard statistics derived from full table scans."""
from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel

from fleet.schemas.maintenance import MaintenanceRecord
from fleet.schemas.report import PublicReport
from fleet.schemas.vehicle import Vehicle


class VehicleStats(BaseModel):
    total: int = 0
    by_status: Dict[str, int] = {}

    @property
    def available(self) -> int:
        return self.by_status.get("active", 0)

    @property
    def in_maintenance(self) -> int:
        return self.by_status.get("maintenance", 0)


class MaintenanceStats(BaseModel):
    total: int = 0
    this_month: int = 0
    by_status: Dict[str, int] = {}
    total_cost: float = 0.0


class FleetStats(BaseModel):
    vehicles: VehicleStats
    maintenance: MaintenanceStats
    new_reports: int = 0


class ServiceTypeSummary(BaseModel):
    service_type: str
    count: int
    total_cost: float
    last_performed: Optional[str] = None


def total_maintenance_cost(records: Iterable[MaintenanceRecord]) -> float:
    """Sum of cost over records that have one; records without a cost are skipped."""
    return sum(r.cost for r in records if r.cost is not None)


def is_in_month(value: Optional[str], year: int, month: int) -> bool:
    """True when an ISO date/datetime string falls in the given month."""
    if not value:
        return False
    return value[:7] == f"{year:04d}-{month:02d}"


def fleet_stats(
    vehicles: Sequence[Vehicle],
    records: Sequence[MaintenanceRecord],
    reports: Sequence[PublicReport] = (),
    today: Optional[date] = None,
) -> FleetStats:
    today = today or date.today()
    this_month = [r for r in records if is_in_month(r.date, today.year, today.month)]
    return FleetStats(
        vehicles=VehicleStats(
            total=len(vehicles),
            by_status=dict(Counter(v.status for v in vehicles)),
        ),
        maintenance=MaintenanceStats(
            total=len(records),
            this_month=len(this_month),
            by_status=dict(Counter(r.status for r in records)),
            total_cost=total_maintenance_cost(records),
        ),
        new_reports=sum(1 for r in reports if not r.status or r.status == "new"),
    )


def cost_by_service_type(records: Iterable[MaintenanceRecord]) -> List[ServiceTypeSummary]:
    """Count, cost and most recent date per service type, most expensive first."""
    grouped: Dict[str, List[MaintenanceRecord]] = {}
    for record in records:
        grouped.setdefault(record.service_type, []).append(record)

    summaries = [
        ServiceTypeSummary(
            service_type=service_type,
            count=len(group),
            total_cost=total_maintenance_cost(group),
            last_performed=max((r.date for r in group if r.date), default=None),
        )
        for service_type, group in grouped.items()
    ]
    return sorted(summaries, key=lambda s: (-s.total_cost, s.service_type))
