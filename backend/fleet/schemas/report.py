from pydantic import Field
from typing import List, Literal, Optional

from fleet.schemas.base import Document, Patch

ReportStatus = Literal["new", "reviewed", "processed"]


class ReportCreate(Document):
    """Public incident report. ``barcode`` is matched against vehicles by string."""

    barcode: str = Field(min_length=1)
    driver_name: str = Field(min_length=1)
    mileage: Optional[str] = None
    notes: Optional[str] = None
    feature: Optional[str] = None
    project: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    images: List[str] = []
    status: ReportStatus = "new"


class ReportUpdate(Patch):
    not_null = ("barcode", "driver_name", "images", "status")

    barcode: Optional[str] = Field(default=None, min_length=1)
    driver_name: Optional[str] = Field(default=None, min_length=1)
    mileage: Optional[str] = None
    notes: Optional[str] = None
    feature: Optional[str] = None
    project: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    images: Optional[List[str]] = None
    status: Optional[ReportStatus] = None


class PublicReport(ReportCreate):
    id: str
    submitted_at: str
    updated_at: str
