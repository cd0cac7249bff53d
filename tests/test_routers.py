from unittest.mock import AsyncMock
import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.spacex.dependency import get_spacex_client
from app.spacex.exceptions import FetchError
from app.spacex.schema import Launch, Launchpad, Payload, Rocket

LAUNCHES = [
    Launch(id="L1", name="FalconSat", date_utc="2006-03-24T22:30:00Z", rocket="R1", success=False, launchpad="LP1"),
    Launch(id="L2", name="Future-1", date_utc="2099-01-01T00:00:00Z", rocket="R2", launchpad="LP1"),
    Launch(id="L3", name="CRS-1", date_utc="2012-10-08T00:35:00Z", rocket="R2", success=True, launchpad="LP1"),
]


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.get_launches.return_value = LAUNCHES
    client.get_rockets.return_value = [Rocket(id="R1", name="Falcon 1"), Rocket(id="R2", name="Falcon 9")]
    client.get_rocket.return_value = Rocket(id="R2", name="Falcon 9")
    client.get_launchpad.return_value = Launchpad(id="LP1", name="CCSFS SLC 40")
    client.get_payload.side_effect = lambda payload_id: Payload(id=payload_id, name=f"Payload {payload_id}")
    return client


@pytest.fixture
def http(mock_client):
    app.dependency_overrides[get_spacex_client] = lambda: mock_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_launch_list_sorted_with_rocket_names(http):
    resp = http.get("/api/v1/launches/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "loaded"
    assert body["filter"] == "All"
    assert body["total"] == 3
    assert [i["id"] for i in body["data"]] == ["L2", "L3", "L1"]
    assert body["data"][2]["rocket_name"] == "Falcon 1"
    assert body["data"][2]["status"] == "Failed"
    assert body["data"][0]["status"] == "N/A"


def test_launch_list_filters(http):
    past = http.get("/api/v1/launches/", params={"filter": "Past"}).json()
    upcoming = http.get("/api/v1/launches/", params={"filter": "Upcoming"}).json()
    assert [i["id"] for i in past["data"]] == ["L3", "L1"]
    assert [i["id"] for i in upcoming["data"]] == ["L2"]


def test_launch_list_rejects_unknown_filter(http):
    resp = http.get("/api/v1/launches/", params={"filter": "Someday"})
    assert resp.status_code == 422


def test_launch_list_failure(http, mock_client):
    mock_client.get_launches.side_effect = FetchError("Network error", "https://api.spacexdata.com/v4/launches")
    resp = http.get("/api/v1/launches/")
    assert resp.status_code == 502
    body = resp.json()
    assert body["status"] == "failed"
    assert body["data"] == []
    assert "Network error" in body["error"]


def test_launch_detail(http, mock_client):
    launch = {
        "id": "L3",
        "name": "CRS-1",
        "date_utc": "2012-10-08T00:35:00Z",
        "rocket": "R2",
        "success": True,
        "launchpad": "LP1",
        "payloads": ["P2", "P1"],
        "links": {"patch": {"small": "https://images2.imgbox.com/crs1.png"}},
    }
    resp = http.post("/api/v1/launches/detail", json=launch)
    assert resp.status_code == 200
    detail = resp.json()["detail"]
    assert detail["rocket"]["name"] == "Falcon 9"
    assert detail["launchpad"]["name"] == "CCSFS SLC 40"
    assert [i["id"] for i in detail["payloads"]] == ["P2", "P1"]
    assert detail["status"] == "Success"
    assert detail["date"] == "Oct 08, 2012 00:35 UTC"
    assert detail["mission_patch"] == "https://images2.imgbox.com/crs1.png"
    mock_client.get_launches.assert_not_awaited()


def test_launch_detail_failure(http, mock_client):
    mock_client.get_rocket.side_effect = FetchError("Network error", "https://api.spacexdata.com/v4/rockets/R2")
    resp = http.post("/api/v1/launches/detail", json={
        "id": "L3", "name": "CRS-1", "date_utc": "2012-10-08T00:35:00Z", "rocket": "R2",
    })
    assert resp.status_code == 502
    body = resp.json()
    assert body["status"] == "failed"
    assert body["detail"] is None
