from pydantic import Field
from typing import Literal, Optional

from fleet.schemas.base import Document, Patch

VehicleStatus = Literal["active", "maintenance", "retired"]


class VehicleBase(Document):
    license_plate: str = Field(min_length=1)
    model: str = Field(min_length=1)
    make: Optional[str] = None
    year: Optional[int] = None
    vin: Optional[str] = None
    barcode: Optional[str] = None


class VehicleCreate(VehicleBase):
    status: VehicleStatus = "active"
    mileage: int = Field(default=0, ge=0)
    last_service: Optional[str] = None
    next_service: Optional[str] = None


class VehicleUpdate(Patch):
    not_null = ("license_plate", "model", "status", "mileage")

    license_plate: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    make: Optional[str] = None
    year: Optional[int] = None
    vin: Optional[str] = None
    barcode: Optional[str] = None
    status: Optional[VehicleStatus] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    last_service: Optional[str] = None
    next_service: Optional[str] = None


class Vehicle(VehicleCreate):
    id: str
    created_at: str
    updated_at: str

    @property
    def display_name(self) -> str:
        return f"{self.license_plate} - {self.model}"
