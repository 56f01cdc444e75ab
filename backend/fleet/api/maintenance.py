from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from fleet.api.deps import get_maintenance
from fleet.repositories import MaintenanceRepository
from fleet.schemas.maintenance import (
    MaintenanceCreate,
    MaintenanceRecord,
    MaintenanceStatus,
    MaintenanceUpdate,
)

router = APIRouter()


@router.get("", response_model=List[MaintenanceRecord])
def get_maintenance_records(
    vehicle_id: Optional[str] = Query(default=None, alias="vehicleId"),
    status: Optional[MaintenanceStatus] = None,
    repo: MaintenanceRepository = Depends(get_maintenance),
):
    """Get all maintenance records."""
    if vehicle_id:
        records = repo.get_by_vehicle(vehicle_id)
        if status:
            records = [r for r in records if r.status == status]
        return records
    if status:
        return repo.get_by_status(status)
    return repo.get_all()


@router.get("/{record_id}", response_model=MaintenanceRecord)
def get_maintenance_record(record_id: str, repo: MaintenanceRepository = Depends(get_maintenance)):
    """Get a specific maintenance record."""
    record = repo.get(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return record


@router.post("", response_model=MaintenanceRecord, status_code=201)
def create_maintenance_record(record: MaintenanceCreate, repo: MaintenanceRepository = Depends(get_maintenance)):
    """Create a new maintenance record."""
    return repo.create(record)


@router.put("/{record_id}", response_model=MaintenanceRecord)
def update_maintenance_record(
    record_id: str,
    record: MaintenanceUpdate,
    repo: MaintenanceRepository = Depends(get_maintenance),
):
    """Update a maintenance record."""
    updated = repo.update(record_id, record)
    if not updated:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return updated


@router.delete("/{record_id}")
def delete_maintenance_record(record_id: str, repo: MaintenanceRepository = Depends(get_maintenance)):
    """Delete a maintenance record."""
    deleted = repo.delete(record_id)
    return {
        "message": "Maintenance record deleted" if deleted else "Maintenance record not found",
        "deleted": deleted,
    }
