# Client side save/delete workflow against the calendar api

import logging
import requests
from pydantic import ValidationError
from typing import Optional
import config
import schemas
from repeat_bounds import validate_repeat_rule
from repeat_generation import generate_repeat_events

logger = logging.getLogger(__name__)


def _dump(model):
    return model.model_dump(mode="json", by_alias=True)


def _error(message):
    return {"status": "error", "message": message}


def _request(method, endpoint, **kwargs):
    """
    Call the calendar api and return its json body.

    Empty responses (204 from a delete) become a success dict. HTTP and
    connection failures become an error dict with the api's `detail`.
    """
    try:
        headers = kwargs.pop('headers', {})
        headers['accept'] = 'application/json'

        url = f"{config.CALENDAR_BASE_URL}{endpoint}"

        response = requests.request(method, url, headers=headers, **kwargs)
        response.raise_for_status()

        if response.status_code == 204 or not response.content:
            return {"status": "success", "message": f"{method.upper()} {endpoint} done"}

        return response.json()
    except requests.exceptions.HTTPError as e:
        try:
            error_detail = e.response.json().get("detail", str(e))
        except ValueError:
            error_detail = e.response.text
        logger.error(f"Calendar api rejected {method} {endpoint}: {e.response.status_code} - {error_detail}")
        return _error(f"API Error: {error_detail}")
    except requests.exceptions.RequestException as e:
        logger.error(f"Calendar api unreachable for {method} {endpoint}: {e}")
        return _error(f"Connection Error: {e}")
def check_health():
    try:
        response = requests.get(f"{config.CALENDAR_BASE_URL}/health", headers={'accept': 'application/json'})
        return response.json().get("status") == "ok"
    except requests.exceptions.RequestException as e:
        logger.error(f"Health check failed: {e}")
        return False


def fetch_events(start_date: Optional[str] = None, end_date: Optional[str] = None):
    params = {}
    if start_date: params['start_date'] = start_date
    if end_date: params['end_date'] = end_date
    return _request("get", "/api/events", params=params)


def save_event(event_data, editing: bool = False, scope: Optional[str] = None):
    """
    Save an event the way the calendar form does.

    Creating a repeating event expands it into its occurrences and posts them
    in one batch. When editing, `scope` decides what the change applies to:
    'single' detaches this occurrence from its group, 'all' updates the whole
    group, no scope is a plain update of the event.

    Args:
        event_data: Event fields (camelCase as sent by the form, or snake_case)
        editing: True when an existing event is being changed
        scope: 'single', 'all' or None

    Returns:
        dict or list: The api response, or {"status": "error", ...} on failure
    """
    try:
        if editing:
            event = schemas.Event.model_validate(event_data)
            edit_scope = schemas.EditScope(scope) if scope else None
        else:
            form = schemas.EventForm.model_validate(event_data)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Not saving event, invalid input: {e}")
        return _error(f"Invalid event: {e}")

    if editing:
        if edit_scope == schemas.EditScope.SINGLE:
            single = event.model_copy(update={"repeat": event.repeat.model_copy(update={"type": schemas.RepeatType.NONE})})
            return _request("put", f"/api/events/{event.id}", json=_dump(single))

        if edit_scope == schemas.EditScope.ALL:
            if not event.repeat.id:
                return _error("Event is not part of a recurring group.")
            return _request("put", f"/api/recurring-events/{event.repeat.id}", json=_dump(event))

        return _request("put", f"/api/events/{event.id}", json=_dump(event))

    error = validate_repeat_rule(form)
    if error:
        logger.warning(f"Not saving '{form.title}': {error}")
        return _error(error)

    if form.repeat.type != schemas.RepeatType.NONE:
        instances = generate_repeat_events(form)
        logger.info(f"Saving '{form.title}' as {len(instances)} occurrences")
        return _request("post", "/api/events-list", json={"events": [_dump(i) for i in instances]})

    return _request("post", "/api/events", json=_dump(form))


def delete_event(event_id: str, scope: Optional[str] = None, repeat_id: Optional[str] = None):
    """Delete one occurrence, or its whole recurring group when scope is 'all'"""
    try:
        edit_scope = schemas.EditScope(scope) if scope else None
    except ValueError as e:
        logger.warning(f"Not deleting event {event_id}: {e}")
        return _error(f"Invalid scope: {e}")

    if edit_scope == schemas.EditScope.ALL:
        if not repeat_id:
            return _error("repeat_id is required to delete a recurring group.")
        return _request("delete", f"/api/recurring-events/{repeat_id}")
    return _request("delete", f"/api/events/{event_id}")
