# Event routes of the API: single events and the batch create used for recurrences

import logging
from fastapi import APIRouter, HTTPException
from typing import Optional
import database
import utils
import schemas
import repeat_bounds

logger = logging.getLogger(__name__)
router = APIRouter()

INSERT_EVENT_QUERY = f"""
    INSERT INTO events ({utils.EVENT_COLUMNS})
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
"""


def check_event_form(form: schemas.EventForm):
    """
    Reject an event whose date or repeat rule is not acceptable.

    Raises:
        HTTPException: 400 with the validation message.
    """
    error = repeat_bounds.validate_repeat_rule(form)
    if error:
        logger.warning(f"Rejected repeat rule for '{form.title}' on {form.date}: {error}")
        raise HTTPException(status_code=400, detail=error)


def _created_event(event_id: str, form: schemas.EventForm, repeat_id: Optional[str]):
    event = form.model_dump()
    event["id"] = event_id
    event["repeat"]["id"] = repeat_id
    return event


@router.get("/events", response_model=schemas.EventsResponse)
async def list_events(
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
):
    """List events, optionally only those between start_date and end_date (inclusive)"""
    conds, params = [], []
    if start_date:
        if utils.validate_date_format(start_date) is None:
            raise HTTPException(status_code=400, detail="Invalid start_date format")
        conds.append("date >= %s")
        params.append(start_date)
    if end_date:
        if utils.validate_date_format(end_date) is None:
            raise HTTPException(status_code=400, detail="Invalid end_date format")
        conds.append("date <= %s")
        params.append(end_date)

    try:
        cursor = database.get_app_cursor()
        where = f" WHERE {' AND '.join(conds)}" if conds else ""
        cursor.execute(f"SELECT {utils.EVENT_COLUMNS} FROM events{where} ORDER BY date, start_time", tuple(params))
        events = [utils.row_to_event(row) for row in cursor.fetchall()]

        logger.info(f"Found {len(events)} events")
        return {"events": events}
    except Exception as e:
        logger.error(f"Failed to list events: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to list events: {str(e)}")


@router.get("/events/{event_id}", response_model=schemas.Event)
async def get_event(event_id: str):
    """Get a single event"""
    try:
        cursor = database.get_app_cursor()
        cursor.execute(f"SELECT {utils.EVENT_COLUMNS} FROM events WHERE id = %s", (event_id,))
        row = cursor.fetchone()

        if not row:
            raise HTTPException(status_code=404, detail="Event not found")

        return utils.row_to_event(row)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve event {event_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve event {event_id}: {str(e)}")


@router.post("/events", response_model=schemas.Event, status_code=201)
async def create_event(form: schemas.EventForm):
    """Create a single event"""
    check_event_form(form)

    try:
        cursor = database.get_app_cursor()
        event_id = utils.generate_event_id()
        cursor.execute(INSERT_EVENT_QUERY, utils.event_to_params(event_id, form))
        database.get_connection().commit()

        logger.info(f"Created event '{form.title}' on {form.date} with ID {event_id}")
        return _created_event(event_id, form, None)
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to create event: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create event: {str(e)}")


@router.post("/events-list", response_model=schemas.EventsResponse, status_code=201)
async def create_events(body: schemas.EventsList):
    """Create a batch of events, the occurrences of one recurring event share a new repeat id"""
    if not body.events:
        raise HTTPException(status_code=400, detail="At least one event must be provided.")
    for form in body.events:
        check_event_form(form)

    repeat_id = utils.generate_repeat_id()
    created, params = [], []
    for form in body.events:
        event_id = utils.generate_event_id()
        event_repeat_id = repeat_id if form.repeat.type != schemas.RepeatType.NONE else None
        params.append(utils.event_to_params(event_id, form, event_repeat_id))
        created.append(_created_event(event_id, form, event_repeat_id))

    try:
        cursor = database.get_app_cursor()
        cursor.executemany(INSERT_EVENT_QUERY, params)
        database.get_connection().commit()

        logger.info(f"Created {len(created)} events in group {repeat_id}")
        return {"events": created}
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to create events: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create events: {str(e)}")


@router.put("/events/{event_id}", response_model=schemas.Event)
async def update_event(event_id: str, form: schemas.EventForm):
    """Replace a single event, a 'none' repeat type detaches it from its recurring group"""
    check_event_form(form)

    try:
        cursor = database.get_app_cursor()
        cursor.execute("SELECT repeat_id FROM events WHERE id = %s", (event_id,))
        current = cursor.fetchone()

        if not current:
            logger.error(f"Event {event_id} not found")
            raise HTTPException(status_code=404, detail="Event not found")

        if form.repeat.type == schemas.RepeatType.NONE:
            repeat_id = None
        else:
            repeat_id = form.repeat.id or current["repeat_id"]

        update_query = """
            UPDATE events SET title = %s, date = %s, start_time = %s, end_time = %s,
                description = %s, location = %s, category = %s, repeat_type = %s,
                repeat_interval = %s, repeat_end_date = %s, repeat_id = %s, notification_time = %s
            WHERE id = %s
        """
        values = utils.event_to_params(event_id, form, repeat_id)[1:] + (event_id,)
        cursor.execute(update_query, values)
        database.get_connection().commit()

        logger.info(f"Updated event with ID {event_id}")
        return _created_event(event_id, form, repeat_id)
    except HTTPException:
        raise
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to update event: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to update event: {str(e)}")


@router.delete("/events/{event_id}", response_model=schemas.MessageResponse)
async def delete_event(event_id: str):
    """Delete a single event, other occurrences of its group are kept"""
    try:
        cursor = database.get_app_cursor()
        cursor.execute("SELECT id FROM events WHERE id = %s", (event_id,))
        if not cursor.fetchone():
            logger.error(f"Event {event_id} not found for deletion")
            raise HTTPException(status_code=404, detail="Event not found")

        cursor.execute("DELETE FROM events WHERE id = %s", (event_id,))
        database.get_connection().commit()

        logger.info(f"Deleted event with ID {event_id}")
        return {"message": f"Event with ID {event_id} deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to delete event: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to delete event: {str(e)}")
