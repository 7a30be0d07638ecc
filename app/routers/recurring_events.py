# Routes acting on a whole recurring group at once

import logging
from fastapi import APIRouter, HTTPException
import database
import utils
import schemas

logger = logging.getLogger(__name__)
router = APIRouter()

# Fields of RecurringEventUpdate, named like their columns
GROUP_UPDATE_COLUMNS = ("title", "start_time", "end_time", "description", "location", "category", "notification_time")


def _fetch_group(cursor, repeat_id):
    cursor.execute(
        f"SELECT {utils.EVENT_COLUMNS} FROM events WHERE repeat_id = %s ORDER BY date, start_time",
        (repeat_id,)
    )
    return [utils.row_to_event(row) for row in cursor.fetchall()]


@router.put("/recurring-events/{repeat_id}", response_model=schemas.EventsResponse)
async def update_recurring_events(repeat_id: str, update: schemas.RecurringEventUpdate):
    """Apply the given fields to every occurrence of a recurring group, dates stay as they are"""
    try:
        cursor = database.get_app_cursor()
        cursor.execute("SELECT COUNT(*) AS total FROM events WHERE repeat_id = %s", (repeat_id,))
        if not cursor.fetchone()["total"]:
            logger.error(f"Recurring group {repeat_id} not found")
            raise HTTPException(status_code=404, detail="Recurring event group not found")

        changes = update.model_dump(exclude_none=True)
        update_fields = [f"{col} = %s" for col in GROUP_UPDATE_COLUMNS if col in changes]
        update_values = [changes[col] for col in GROUP_UPDATE_COLUMNS if col in changes]

        if update_fields:
            update_query = f"UPDATE events SET {', '.join(update_fields)} WHERE repeat_id = %s"
            update_values.append(repeat_id)
            cursor.execute(update_query, tuple(update_values))
            database.get_connection().commit()
            logger.info(f"Updated {cursor.rowcount} events in group {repeat_id}")

        return {"events": _fetch_group(cursor, repeat_id)}
    except HTTPException:
        raise
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to update recurring group {repeat_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to update recurring events: {str(e)}")


@router.delete("/recurring-events/{repeat_id}", response_model=schemas.MessageResponse)
async def delete_recurring_events(repeat_id: str):
    """Delete every occurrence of a recurring group"""
    try:
        cursor = database.get_app_cursor()
        cursor.execute("DELETE FROM events WHERE repeat_id = %s", (repeat_id,))
        deleted = cursor.rowcount

        if not deleted:
            database.get_connection().rollback()
            logger.error(f"Recurring group {repeat_id} not found for deletion")
            raise HTTPException(status_code=404, detail="Recurring event group not found")

        database.get_connection().commit()

        logger.info(f"Deleted {deleted} events in group {repeat_id}")
        return {"message": f"Deleted {deleted} events of recurring group {repeat_id}"}
    except HTTPException:
        raise
    except Exception as e:
        database.get_connection().rollback()
        logger.error(f"Failed to delete recurring group {repeat_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to delete recurring events: {str(e)}")
