"""
API tests for the REST endpoints.

Tests:
- /api/vehicles CRUD and filters
- /api/maintenance CRUD and the vehicle index
- /api/reports public form and status updates
- /api/calendar CRUD
- /api/history audit trail
- /api/auth login/register/me
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from fleet.api.deps import get_gateway
from fleet.core.gateway import TableGateway
from fleet.main import app


def create_vehicle(api, **fields):
    body = {"licensePlate": "FLT-010", "model": "Test", **fields}
    response = api.post("/api/vehicles", json=body)
    assert response.status_code == 201
    return response.json()


class TestVehicles:
    def test_end_to_end(self, api):
        vehicle = create_vehicle(api)
        assert vehicle["status"] == "active"
        assert vehicle["createdAt"] == vehicle["updatedAt"]

        listed = api.get("/api/vehicles").json()
        assert [v["id"] for v in listed] == [vehicle["id"]]

        response = api.put(f"/api/vehicles/{vehicle['id']}", json={"status": "maintenance"})
        assert response.status_code == 200

        fetched = api.get(f"/api/vehicles/{vehicle['id']}").json()
        assert fetched["status"] == "maintenance"
        assert fetched["updatedAt"] >= vehicle["updatedAt"]
        assert fetched["licensePlate"] == "FLT-010"

        response = api.delete(f"/api/vehicles/{vehicle['id']}")
        assert response.json()["deleted"] is True
        assert api.get(f"/api/vehicles/{vehicle['id']}").status_code == 404

    def test_list_empty(self, api):
        response = api.get("/api/vehicles")
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_by_status(self, api):
        create_vehicle(api, licensePlate="A-1")
        create_vehicle(api, licensePlate="B-2", status="retired")
        retired = api.get("/api/vehicles", params={"status": "retired"}).json()
        assert [v["licensePlate"] for v in retired] == ["B-2"]

    def test_missing_required_field(self, api):
        response = api.post("/api/vehicles", json={"model": "Test"})
        assert response.status_code == 422
        assert api.get("/api/vehicles").json() == []

    def test_update_missing(self, api):
        response = api.put("/api/vehicles/nope", json={"status": "retired"})
        assert response.status_code == 404

    def test_update_rejects_unknown_field(self, api):
        vehicle = create_vehicle(api)
        response = api.put(f"/api/vehicles/{vehicle['id']}", json={"createdAt": "1999-01-01"})
        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["status", "licensePlate", "model", "mileage"])
    def test_update_rejects_null_required_field(self, api, field):
        vehicle = create_vehicle(api)

        response = api.put(f"/api/vehicles/{vehicle['id']}", json={field: None})

        assert response.status_code == 422
        assert api.get(f"/api/vehicles/{vehicle['id']}").json() == vehicle
        assert api.get("/api/vehicles").json() == [vehicle]

    def test_update_allows_clearing_optional_field(self, api):
        vehicle = create_vehicle(api, vin="VIN-1")
        updated = api.put(f"/api/vehicles/{vehicle['id']}", json={"vin": None}).json()
        assert updated["vin"] is None

    def test_delete_is_idempotent(self, api):
        response = api.delete("/api/vehicles/nope")
        assert response.status_code == 200
        assert response.json()["deleted"] is False


class TestMaintenance:
    def test_records_survive_vehicle_deletion(self, api):
        vehicle = create_vehicle(api)
        record = api.post("/api/maintenance", json={
            "vehicleId": vehicle["id"],
            "serviceType": "brakes",
            "date": "2024-05-02",
            "cost": 300,
        }).json()

        api.delete(f"/api/vehicles/{vehicle['id']}")

        assert api.get(f"/api/maintenance/{record['id']}").status_code == 200
        by_vehicle = api.get("/api/maintenance", params={"vehicleId": vehicle["id"]}).json()
        assert [r["id"] for r in by_vehicle] == [record["id"]]

    def test_vehicle_maintenance_newest_first(self, api):
        vehicle = create_vehicle(api)
        for day in ("2024-01-01", "2024-03-01", "2024-02-01"):
            api.post("/api/maintenance", json={"vehicleId": vehicle["id"], "serviceType": "check", "date": day})
        records = api.get(f"/api/vehicles/{vehicle['id']}/maintenance").json()
        assert [r["date"] for r in records] == ["2024-03-01", "2024-02-01", "2024-01-01"]

    def test_filter_by_status(self, api):
        api.post("/api/maintenance", json={"vehicleId": "v1", "serviceType": "a", "date": "2024-01-01"})
        api.post("/api/maintenance", json={
            "vehicleId": "v1", "serviceType": "b", "date": "2024-01-02", "status": "completed",
        })
        completed = api.get("/api/maintenance", params={"status": "completed"}).json()
        assert [r["serviceType"] for r in completed] == ["b"]
        scoped = api.get("/api/maintenance", params={"vehicleId": "v1", "status": "scheduled"}).json()
        assert [r["serviceType"] for r in scoped] == ["a"]

    def test_update_and_delete(self, api):
        record = api.post("/api/maintenance", json={"vehicleId": "v1", "serviceType": "a", "date": "2024-01-01"}).json()
        updated = api.put(f"/api/maintenance/{record['id']}", json={"status": "in-progress"}).json()
        assert updated["status"] == "in-progress"
        assert updated["serviceType"] == "a"
        assert api.delete(f"/api/maintenance/{record['id']}").json()["deleted"] is True
        assert api.get(f"/api/maintenance/{record['id']}").status_code == 404

    @pytest.mark.parametrize("changes", [
        {"serviceType": None},
        {"date": None},
        {"date": ""},
        {"tasks": None},
    ])
    def test_update_rejects_invalid_patch(self, api, changes):
        record = api.post("/api/maintenance", json={"vehicleId": "v1", "serviceType": "a", "date": "2024-01-01"}).json()

        response = api.put(f"/api/maintenance/{record['id']}", json=changes)

        assert response.status_code == 422
        assert api.get(f"/api/maintenance/{record['id']}").json() == record


class TestReports:
    def test_public_submission_and_review(self, api):
        response = api.post("/api/reports", json={
            "barcode": "BC-1",
            "driverName": "Noa",
            "mileage": "51000",
            "images": ["front.jpg"],
        })
        assert response.status_code == 201
        report = response.json()
        assert report["status"] == "new"
        assert "submittedAt" in report

        updated = api.put(f"/api/reports/{report['id']}", json={"status": "reviewed"}).json()
        assert updated["status"] == "reviewed"
        assert [r["id"] for r in api.get("/api/reports", params={"status": "reviewed"}).json()] == [report["id"]]

    def test_missing_driver_name(self, api):
        response = api.post("/api/reports", json={"barcode": "BC-1"})
        assert response.status_code == 422

    def test_null_status_rejected(self, api):
        report = api.post("/api/reports", json={"barcode": "BC-1", "driverName": "Noa"}).json()
        assert api.put(f"/api/reports/{report['id']}", json={"status": None}).status_code == 422
        assert api.get(f"/api/reports/{report['id']}").json()["status"] == "new"


class TestCalendar:
    def test_crud(self, api):
        event = api.post("/api/calendar", json={
            "title": "Inspection",
            "date": "2024-06-01",
            "type": "inspection",
        }).json()
        assert api.get("/api/calendar", params={"date": "2024-06-01"}).json()[0]["id"] == event["id"]
        assert api.put(f"/api/calendar/{event['id']}", json={"time": "10:00"}).json()["time"] == "10:00"
        assert api.delete(f"/api/calendar/{event['id']}").json()["deleted"] is True
        assert api.get(f"/api/calendar/{event['id']}").status_code == 404

    def test_invalid_type(self, api):
        response = api.post("/api/calendar", json={"title": "x", "date": "2024-06-01", "type": "party"})
        assert response.status_code == 422

    def test_null_date_rejected(self, api):
        event = api.post("/api/calendar", json={"title": "Inspection", "date": "2024-05-01"}).json()

        assert api.put(f"/api/calendar/{event['id']}", json={"date": None}).status_code == 422

        on_day = api.get("/api/calendar", params={"date": "2024-05-01"})
        assert on_day.status_code == 200
        assert [e["id"] for e in on_day.json()] == [event["id"]]


class TestHistory:
    def test_records_mutations(self, api):
        vehicle = create_vehicle(api)
        api.put(f"/api/vehicles/{vehicle['id']}", json={"mileage": 10})

        entries = api.get("/api/history", params={"entityType": "vehicle", "entityId": vehicle["id"]}).json()
        assert [e["action"] for e in entries] == ["created", "updated"]

    def test_performed_by_comes_from_token(self, api):
        api.post("/api/auth/register", json={"username": "dana", "password": "fleet-pass-1"})
        token = api.post("/api/auth/login", json={"username": "dana", "password": "fleet-pass-1"}).json()["access_token"]

        api.post(
            "/api/vehicles",
            json={"licensePlate": "A-1", "model": "Van"},
            headers={"Authorization": f"Bearer {token}"},
        )
        entries = api.get("/api/history").json()
        assert entries[0]["performedBy"] == "dana"


class TestAuth:
    def test_register_and_login(self, api):
        response = api.post("/api/auth/register", json={
            "username": "admin", "password": "fleet-pass-1", "email": "a@example.com", "role": "admin",
        })
        assert response.status_code == 201
        assert "hashedPassword" not in response.json()

        response = api.post("/api/auth/login", json={"username": "admin", "password": "fleet-pass-1"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["role"] == "admin"

        me = api.get("/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.json() == {"username": "admin", "role": "admin"}

    def test_bad_credentials(self, api):
        response = api.post("/api/auth/login", json={"username": "ghost", "password": "whatever1"})
        assert response.status_code == 401

    def test_duplicate_username(self, api):
        api.post("/api/auth/register", json={"username": "admin", "password": "fleet-pass-1"})
        response = api.post("/api/auth/register", json={"username": "admin", "password": "fleet-pass-2"})
        assert response.status_code == 400

    def test_short_password(self, api):
        response = api.post("/api/auth/register", json={"username": "admin", "password": "short"})
        assert response.status_code == 400

    def test_me_requires_token(self, api):
        assert api.get("/api/auth/me").status_code == 401


class TestErrors:
    @pytest.fixture
    def broken_gateway(self):
        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
        app.dependency_overrides[get_gateway] = lambda: TableGateway(db)
        yield
        app.dependency_overrides.pop(get_gateway, None)

    def test_datastore_failure_returns_503(self, api, broken_gateway):
        response = api.get("/api/vehicles")
        assert response.status_code == 503
        assert "Datastore error" in response.json()["detail"]

    def test_health(self, api):
        response = api.get("/health")
        assert response.status_code == 200
        assert response.json()["database"]["connected"] is True
