"""Filtering and counting of public incident reports."""
from typing import Dict, List, Optional, Sequence

from fleet.schemas.report import PublicReport
from fleet.schemas.vehicle import Vehicle

REPORT_STATUSES = ("new", "reviewed", "processed")


def _matches(report: PublicReport, term: str) -> bool:
    fields = (report.driver_name, report.barcode, report.project)
    return any(value and term in value.lower() for value in fields)


def filter_reports(
    reports: Sequence[PublicReport],
    search: str = "",
    status: str = "all",
) -> List[PublicReport]:
    """Case-insensitive search on driver name, barcode and project, plus a status filter."""
    term = search.strip().lower()
    return [
        r for r in reports
        if (not term or _matches(r, term)) and (status == "all" or r.status == status)
    ]


def report_status_counts(reports: Sequence[PublicReport]) -> Dict[str, int]:
    counts = {"all": len(reports)}
    for status in REPORT_STATUSES:
        counts[status] = sum(1 for r in reports if r.status == status)
    return counts


def find_vehicle_for_report(report: PublicReport, vehicles: Sequence[Vehicle]) -> Optional[Vehicle]:
    """Resolve the report's barcode to a vehicle by string match on barcode, then plate."""
    for vehicle in vehicles:
        if vehicle.barcode and vehicle.barcode == report.barcode:
            return vehicle
    for vehicle in vehicles:
        if vehicle.license_plate == report.barcode:
            return vehicle
    return None
