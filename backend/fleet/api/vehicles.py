from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional

from fleet.api.deps import get_maintenance, get_vehicles
from fleet.repositories import MaintenanceRepository, VehicleRepository
from fleet.schemas.maintenance import MaintenanceRecord
from fleet.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate, VehicleStatus

router = APIRouter()


@router.get("", response_model=List[Vehicle])
def list_vehicles(status: Optional[VehicleStatus] = None, repo: VehicleRepository = Depends(get_vehicles)):
    """Get all vehicles, optionally only those with a given status."""
    if status:
        return repo.get_by_status(status)
    return repo.get_all()


@router.post("", response_model=Vehicle, status_code=201)
def create_vehicle(vehicle: VehicleCreate, repo: VehicleRepository = Depends(get_vehicles)):
    """Register a vehicle."""
    return repo.create(vehicle)


@router.get("/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: str, repo: VehicleRepository = Depends(get_vehicles)):
    vehicle = repo.get(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle


@router.put("/{vehicle_id}", response_model=Vehicle)
def update_vehicle(vehicle_id: str, vehicle: VehicleUpdate, repo: VehicleRepository = Depends(get_vehicles)):
    """Update vehicle information (e.g., status or mileage)."""
    updated = repo.update(vehicle_id, vehicle)
    if not updated:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return updated


@router.delete("/{vehicle_id}")
def delete_vehicle(vehicle_id: str, repo: VehicleRepository = Depends(get_vehicles)):
    """Delete a vehicle. Its maintenance records are kept."""
    deleted = repo.delete(vehicle_id)
    return {"message": "Vehicle deleted" if deleted else "Vehicle not found", "deleted": deleted}


@router.get("/{vehicle_id}/maintenance", response_model=List[MaintenanceRecord])
def get_vehicle_maintenance(vehicle_id: str, repo: MaintenanceRepository = Depends(get_maintenance)):
    """Maintenance records for one vehicle, newest first."""
    records = repo.get_by_vehicle(vehicle_id)
    return sorted(records, key=lambda r: r.date, reverse=True)
