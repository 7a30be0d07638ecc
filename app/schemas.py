from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from enum import Enum


class RepeatType(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class EditScope(str, Enum):
    SINGLE = "single"
    ALL = "all"


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RepeatInfo(CamelModel):
    type: RepeatType = RepeatType.NONE
    interval: int = 1
    end_date: Optional[str] = None
    id: Optional[str] = None


class EventForm(CamelModel):
    title: str
    date: str
    start_time: str
    end_time: str
    description: str = ""
    location: str = ""
    category: str = ""
    repeat: RepeatInfo = Field(default_factory=RepeatInfo)
    notification_time: int = 10


class Event(EventForm):
    id: str


class EventsList(CamelModel):
    events: List[EventForm]


class EventsResponse(CamelModel):
    events: List[Event]


class RecurringEventUpdate(CamelModel):
    title: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    notification_time: Optional[int] = None


class MessageResponse(BaseModel):
    message: str
