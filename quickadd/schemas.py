from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .models import Priority, RepeatFrequency


class ParsedTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    due_date: datetime | None = None
    priority: Priority = Priority.none
    tag_names: tuple[str, ...] = ()
    repeat_frequency: RepeatFrequency | None = None
    is_someday: bool = False


class ParseIn(BaseModel):
    text: str = Field("", max_length=2000)
    now: datetime | None = None
