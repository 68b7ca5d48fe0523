"""Task domain models.

Pure domain models for tasks and their subtasks. Uses Pydantic so task
documents can be read from and written to the camelCase JSON the mobile
client exchanges (``aiEstimatedDuration``, ``scheduledTime``, ...), while
Python code uses snake_case attribute names.
"""

from datetime import date, datetime
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from focusflow.domain.types import CLOCK_TIME_PATTERN, Difficulty, Phase, Priority

# Minutes assumed for a subtask that carries no estimate.
DEFAULT_SUBTASK_MINUTES = 30

_CATEGORICAL = (Difficulty, Priority, Phase)


class _Document(BaseModel):
    """Base for models that round-trip through task documents.

    Categorical fields left UNSPECIFIED are omitted on output, so a field
    that was absent in the document stays absent.
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_serializer(mode="wrap")
    def _omit_unspecified(
        self,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if isinstance(value, _CATEGORICAL) and value.name == "UNSPECIFIED":
                key = field.alias if info.by_alias and field.alias else name
                data.pop(key, None)
        return data


class SessionRecord(_Document):
    """One focus session credited to a subtask."""

    date: date
    duration: int
    notes: str | None = None


class EnhancedSubtask(_Document):
    """A step inside a task.

    Subtasks only exist inside their parent task's collection; ``id`` is
    unique within that collection.

    ``text`` is the authoritative content and ``title`` a display alias;
    both are set from the same input when a subtask is created by hand.
    The two duration fields are independent: ``ai_estimated_duration`` is
    what the duration editor changes, ``estimated_duration`` is what time
    aggregation sums.

    The progress fields (``time_spent`` onwards) are filled in as focus
    sessions are credited; see ``progress.update_subtask_progress``.
    """

    id: str = Field(frozen=True)
    title: str | None = None
    text: str
    completed: bool = False
    completed_at: datetime | None = None
    ai_estimated_duration: int | None = None
    user_estimated_duration: int | None = None
    estimated_duration: int | None = None
    difficulty: Difficulty = Difficulty.UNSPECIFIED
    order: int
    phase: Phase = Phase.UNSPECIFIED
    skills: list[str] = Field(default_factory=list)
    recommended_resources: list[str] = Field(default_factory=list)
    time_spent: int | None = None
    remaining_time: int | None = None
    total_duration: int | None = None
    progress_percentage: int | None = None
    last_session_time: int | None = None
    session_history: list[SessionRecord] = Field(default_factory=list)

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value: Any) -> Difficulty:
        return Difficulty.parse(value)

    @field_validator("phase", mode="before")
    @classmethod
    def _parse_phase(cls, value: Any) -> Phase:
        return Phase.parse(value)

    @property
    def display_title(self) -> str:
        """Title to show in lists, falling back to the text."""
        return self.title or self.text


class Task(_Document):
    """A unit of work the user plans, schedules and focuses on.

    ``completed`` is toggled by the user and is never derived from the
    subtasks. ``scheduled_end_time`` only means something when
    ``scheduled_time`` is also set; see ``display.scheduled_window``.
    """

    id: str = Field(frozen=True)
    title: str = Field(min_length=1)
    description: str | None = None
    completed: bool = False
    difficulty: Difficulty = Difficulty.UNSPECIFIED
    priority: Priority = Priority.UNSPECIFIED
    duration: int | None = None
    scheduled_time: str | None = Field(default=None, pattern=CLOCK_TIME_PATTERN)
    scheduled_end_time: str | None = Field(default=None, pattern=CLOCK_TIME_PATTERN)
    due_date: date | None = None
    tags: list[str] = Field(default_factory=list)
    subtasks: list[EnhancedSubtask] = Field(default_factory=list)

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value: Any) -> Difficulty:
        return Difficulty.parse(value)

    @field_validator("priority", mode="before")
    @classmethod
    def _parse_priority(cls, value: Any) -> Priority:
        return Priority.parse(value)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON document shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
