# Shared utility functions for unit tests

import sys
import os
import datetime
from contextlib import contextmanager
from unittest.mock import MagicMock, patch
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'app'))
import schemas

def event_form(date="2025-01-31", repeat_type="none", interval=1, end_date=None, **fields):
    """Build an event form the way the calendar form submits it"""
    data = {
        "title": "Test Event",
        "date": date,
        "startTime": "09:00",
        "endTime": "10:00",
        "description": "",
        "location": "",
        "category": "업무",
        "repeat": {"type": repeat_type, "interval": interval, "endDate": end_date},
        "notificationTime": 10,
    }
    data.update(fields)
    return schemas.EventForm.model_validate(data)

def event_row(event_id="e-1", date=datetime.date(2025, 1, 31), repeat_type="none", repeat_id=None, **fields):
    """Build a row of the events table as a dictionary cursor returns it"""
    row = {
        "id": event_id,
        "title": "Test Event",
        "date": date,
        "start_time": "09:00",
        "end_time": "10:00",
        "description": None,
        "location": None,
        "category": "업무",
        "repeat_type": repeat_type,
        "repeat_interval": 1,
        "repeat_end_date": None,
        "repeat_id": repeat_id,
        "notification_time": 10,
    }
    row.update(fields)
    return row

@contextmanager
def mock_database():
    """Replace the database with mocks, yields (cursor, connection)"""
    cursor = MagicMock()
    connection = MagicMock()
    with patch("database.get_app_cursor", return_value=cursor), \
            patch("database.get_connection", return_value=connection):
        yield cursor, connection

def executed_sql(cursor):
    """All SQL statements run on a mocked cursor, in order"""
    return [c.args[0] for c in cursor.execute.call_args_list]
