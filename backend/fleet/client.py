"""
Fleet API client.

Async HTTP client for the REST API plus the views built on top of it.
Every view re-fetches the full tables it needs; nothing is cached and
failed requests are not retried.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from fleet.core.config import settings
from fleet.schemas.calendar import CalendarEvent, CalendarEventCreate, CalendarEventUpdate
from fleet.schemas.maintenance import MaintenanceCreate, MaintenanceRecord, MaintenanceUpdate
from fleet.schemas.report import PublicReport, ReportCreate, ReportUpdate
from fleet.schemas.user import User
from fleet.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate
from fleet.services.calendar_view import CalendarEntry, calendar_view
from fleet.services.stats import FleetStats, fleet_stats

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FleetApiError(Exception):
    """A request failed: transport error or non-2xx response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class ClientSession:
    """Login state for one client. Passed explicitly to the views that need it."""

    username: Optional[str] = None
    role: Optional[str] = None
    access_token: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return self.access_token is not None

    def headers(self) -> Dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}


class FleetClient:
    """Typed wrapper over the REST endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[ClientSession] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.session = session or ClientSession()
        self.client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.API_TIMEOUT,
            transport=transport,
        )

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, headers=self.session.headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling fleet API {method} {path}: {e}")
            raise FleetApiError(f"API request failed: {e}") from e
        if not response.is_success:
            raise FleetApiError(
                f"API request failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response

    async def _list(self, path: str, model: Type[ModelT], params: Optional[dict] = None) -> List[ModelT]:
        response = await self._request("GET", path, params=params)
        return [model.model_validate(item) for item in response.json()]

    async def _get_one(self, path: str, model: Type[ModelT]) -> Optional[ModelT]:
        try:
            response = await self._request("GET", path)
        except FleetApiError as e:
            if e.status_code == 404:
                return None
            raise
        return model.model_validate(response.json())

    async def _send(self, method: str, path: str, body: BaseModel, model: Type[ModelT]) -> ModelT:
        payload = body.model_dump(by_alias=True, exclude_unset=True, mode="json")
        response = await self._request(method, path, json=payload)
        return model.model_validate(response.json())

    async def _delete(self, path: str) -> bool:
        response = await self._request("DELETE", path)
        return bool(response.json().get("deleted"))

    # Vehicles

    async def get_vehicles(self, status: Optional[str] = None) -> List[Vehicle]:
        return await self._list("/vehicles", Vehicle, {"status": status} if status else None)

    async def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        return await self._get_one(f"/vehicles/{vehicle_id}", Vehicle)

    async def create_vehicle(self, vehicle: VehicleCreate) -> Vehicle:
        return await self._send("POST", "/vehicles", vehicle, Vehicle)

    async def update_vehicle(self, vehicle_id: str, changes: VehicleUpdate) -> Vehicle:
        return await self._send("PUT", f"/vehicles/{vehicle_id}", changes, Vehicle)

    async def delete_vehicle(self, vehicle_id: str) -> bool:
        return await self._delete(f"/vehicles/{vehicle_id}")

    # Maintenance

    async def get_maintenance_records(
        self, vehicle_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[MaintenanceRecord]:
        params = {}
        if vehicle_id:
            params["vehicleId"] = vehicle_id
        if status:
            params["status"] = status
        return await self._list("/maintenance", MaintenanceRecord, params or None)

    async def get_maintenance_record(self, record_id: str) -> Optional[MaintenanceRecord]:
        return await self._get_one(f"/maintenance/{record_id}", MaintenanceRecord)

    async def create_maintenance_record(self, record: MaintenanceCreate) -> MaintenanceRecord:
        return await self._send("POST", "/maintenance", record, MaintenanceRecord)

    async def update_maintenance_record(self, record_id: str, changes: MaintenanceUpdate) -> MaintenanceRecord:
        return await self._send("PUT", f"/maintenance/{record_id}", changes, MaintenanceRecord)

    async def delete_maintenance_record(self, record_id: str) -> bool:
        return await self._delete(f"/maintenance/{record_id}")

    # Public reports

    async def get_public_reports(self, status: Optional[str] = None) -> List[PublicReport]:
        return await self._list("/reports", PublicReport, {"status": status} if status else None)

    async def get_public_report(self, report_id: str) -> Optional[PublicReport]:
        return await self._get_one(f"/reports/{report_id}", PublicReport)

    async def create_public_report(self, report: ReportCreate) -> PublicReport:
        return await self._send("POST", "/reports", report, PublicReport)

    async def update_public_report(self, report_id: str, changes: ReportUpdate) -> PublicReport:
        return await self._send("PUT", f"/reports/{report_id}", changes, PublicReport)

    async def delete_public_report(self, report_id: str) -> bool:
        return await self._delete(f"/reports/{report_id}")

    # Calendar

    async def get_calendar_events(self, day: Optional[str] = None) -> List[CalendarEvent]:
        return await self._list("/calendar", CalendarEvent, {"date": day} if day else None)

    async def get_calendar_event(self, event_id: str) -> Optional[CalendarEvent]:
        return await self._get_one(f"/calendar/{event_id}", CalendarEvent)

    async def create_calendar_event(self, event: CalendarEventCreate) -> CalendarEvent:
        return await self._send("POST", "/calendar", event, CalendarEvent)

    async def update_calendar_event(self, event_id: str, changes: CalendarEventUpdate) -> CalendarEvent:
        return await self._send("PUT", f"/calendar/{event_id}", changes, CalendarEvent)

    async def delete_calendar_event(self, event_id: str) -> bool:
        return await self._delete(f"/calendar/{event_id}")

    # Auth

    async def login(self, username: str, password: str) -> ClientSession:
        """Log in and attach the resulting session to this client."""
        response = await self._request("POST", "/auth/login", json={"username": username, "password": password})
        data = response.json()
        user = User.model_validate(data["user"])
        self.session = ClientSession(username=user.username, role=user.role, access_token=data["access_token"])
        return self.session

    def logout(self) -> None:
        self.session = ClientSession()

    async def register(self, username: str, password: str, email: Optional[str] = None, role: str = "viewer") -> User:
        body: Dict[str, Any] = {"username": username, "password": password, "role": role}
        if email:
            body["email"] = email
        response = await self._request("POST", "/auth/register", json=body)
        return User.model_validate(response.json())

    # Views

    async def load_dashboard(self, today: Optional[date] = None) -> FleetStats:
        vehicles, records, reports = await asyncio.gather(
            self.get_vehicles(),
            self.get_maintenance_records(),
            self.get_public_reports(),
        )
        return fleet_stats(vehicles, records, reports, today=today)

    async def load_calendar(self) -> Dict[str, List[CalendarEntry]]:
        vehicles, records, events = await asyncio.gather(
            self.get_vehicles(),
            self.get_maintenance_records(),
            self.get_calendar_events(),
        )
        return calendar_view(records, events, vehicles)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "FleetClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
