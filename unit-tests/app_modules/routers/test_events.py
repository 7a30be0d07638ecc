# Test the event routes of the API

import sys
import os
import datetime
from fastapi.testclient import TestClient

# Add parent directories to path to import app modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..', 'app'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from unit_test_utils import event_form, event_row, mock_database, executed_sql
from app import app

client = TestClient(app)

def _body(form):
    return form.model_dump(mode="json", by_alias=True)

def test_list_events():
    with mock_database() as (cursor, _):
        cursor.fetchall.return_value = [
            event_row("e-1", datetime.date(2025, 1, 6)),
            event_row("e-2", datetime.date(2025, 1, 13), repeat_type="weekly", repeat_id="grp-1"),
        ]
        response = client.get("/api/events")

    assert response.status_code == 200
    events = response.json()["events"]
    assert [e["id"] for e in events] == ["e-1", "e-2"]
    assert events[0]["startTime"] == "09:00"
    assert events[1]["repeat"] == {"type": "weekly", "interval": 1, "endDate": None, "id": "grp-1"}
    assert "ORDER BY date, start_time" in executed_sql(cursor)[0]

def test_list_events_with_window():
    with mock_database() as (cursor, _):
        cursor.fetchall.return_value = []
        response = client.get("/api/events", params={"start_date": "2025-01-01", "end_date": "2025-01-31"})

    assert response.status_code == 200
    sql, params = cursor.execute.call_args.args
    assert "date >= %s AND date <= %s" in sql
    assert params == ("2025-01-01", "2025-01-31")

def test_list_events_bad_window():
    response = client.get("/api/events", params={"start_date": "yesterday"})
    assert response.status_code == 400

def test_get_event():
    with mock_database() as (cursor, _):
        cursor.fetchone.return_value = event_row("e-1")
        response = client.get("/api/events/e-1")
    assert response.status_code == 200
    assert response.json()["date"] == "2025-01-31"

def test_get_event_not_found():
    with mock_database() as (cursor, _):
        cursor.fetchone.return_value = None
        response = client.get("/api/events/missing")
    assert response.status_code == 404

def test_create_event():
    with mock_database() as (cursor, connection):
        response = client.post("/api/events", json=_body(event_form("2025-05-01", title="점심 약속")))

    assert response.status_code == 201
    created = response.json()
    assert created["title"] == "점심 약속"
    assert created["repeat"]["id"] is None
    params = cursor.execute.call_args.args[1]
    assert params[0] == created["id"]
    connection.commit.assert_called_once()

def test_create_event_rejects_bad_repeat_rule():
    with mock_database() as (cursor, _):
        response = client.post("/api/events", json=_body(event_form("2025-05-01", "daily", interval=0)))
        assert response.status_code == 400
        assert response.json()["detail"] == "반복 간격은 1 이상이어야 합니다."

        response = client.post("/api/events", json=_body(event_form("2025-05-01", "daily", end_date="2025-04-01")))
        assert response.status_code == 400
        assert response.json()["detail"] == "반복 종료일은 시작일 이후여야 합니다."
    cursor.execute.assert_not_called()

def test_create_event_rejects_bad_date():
    response = client.post("/api/events", json=_body(event_form("2025-02-30")))
    assert response.status_code == 400

def test_create_event_rejects_unknown_repeat_type():
    body = _body(event_form("2025-05-01"))
    body["repeat"]["type"] = "hourly"
    response = client.post("/api/events", json=body)
    assert response.status_code == 422

def test_create_event_database_failure():
    with mock_database() as (cursor, connection):
        cursor.execute.side_effect = Exception("DB Error")
        response = client.post("/api/events", json=_body(event_form("2025-05-01")))
    assert response.status_code == 500
    connection.rollback.assert_called_once()

def test_create_events_shares_repeat_id():
    forms = [event_form(d, "monthly", end_date="2025-05-31") for d in ("2025-01-31", "2025-03-31", "2025-05-31")]
    with mock_database() as (cursor, connection):
        response = client.post("/api/events-list", json={"events": [_body(f) for f in forms]})

    assert response.status_code == 201
    events = response.json()["events"]
    assert [e["date"] for e in events] == ["2025-01-31", "2025-03-31", "2025-05-31"]
    repeat_ids = {e["repeat"]["id"] for e in events}
    assert len(repeat_ids) == 1 and None not in repeat_ids
    assert len({e["id"] for e in events}) == 3

    sql, rows = cursor.executemany.call_args.args
    assert "INSERT INTO events" in sql
    assert len(rows) == 3
    connection.commit.assert_called_once()

def test_create_events_without_repeat_gets_no_group():
    with mock_database():
        response = client.post("/api/events-list", json={"events": [_body(event_form("2025-05-01"))]})
    assert response.status_code == 201
    assert response.json()["events"][0]["repeat"]["id"] is None

def test_create_events_empty():
    response = client.post("/api/events-list", json={"events": []})
    assert response.status_code == 400

def test_update_event_single_scope_detaches():
    form = event_form("2025-01-13", "none", title="이번 주만 변경")
    with mock_database() as (cursor, connection):
        cursor.fetchone.return_value = {"repeat_id": "grp-1"}
        response = client.put("/api/events/e-2", json=_body(form))

    assert response.status_code == 200
    assert response.json()["repeat"]["id"] is None
    sql, values = cursor.execute.call_args.args
    assert sql.strip().startswith("UPDATE events SET")
    assert values[-1] == "e-2"
    assert values[-3] is None
    connection.commit.assert_called_once()

def test_update_event_keeps_group():
    form = event_form("2025-01-13", "weekly", title="회의")
    with mock_database() as (cursor, _):
        cursor.fetchone.return_value = {"repeat_id": "grp-1"}
        response = client.put("/api/events/e-2", json=_body(form))
    assert response.status_code == 200
    assert response.json()["repeat"]["id"] == "grp-1"

def test_update_event_not_found():
    with mock_database() as (cursor, _):
        cursor.fetchone.return_value = None
        response = client.put("/api/events/missing", json=_body(event_form("2025-01-13")))
    assert response.status_code == 404

def test_delete_event():
    with mock_database() as (cursor, connection):
        cursor.fetchone.return_value = {"id": "e-1"}
        response = client.delete("/api/events/e-1")

    assert response.status_code == 200
    assert "deleted successfully" in response.json()["message"]
    assert executed_sql(cursor)[-1] == "DELETE FROM events WHERE id = %s"
    connection.commit.assert_called_once()

def test_delete_event_not_found():
    with mock_database() as (cursor, _):
        cursor.fetchone.return_value = None
        response = client.delete("/api/events/missing")
    assert response.status_code == 404
