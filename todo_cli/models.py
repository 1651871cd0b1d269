"""
Pydantic models for todo data structures.

LEARNING NOTES:
- Pydantic models validate data automatically and serialize to/from JSON
- frozen=True makes instances immutable; "changing" a task means
  building a copy with model_copy(update=...)
- model_validator(mode="after") runs once the whole object is built,
  which is where cross-field rules (like id ordering) belong

These models define the schema for:
- A single task in the list
- The document written to the data file (tasks + id counter)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


MIN_PRIORITY = 1
MAX_PRIORITY = 5


class Task(BaseModel):
    """
    A single todo entry.

    Example:
        task = Task(
            id=1,
            name="Buy milk",
            priority=3,
            created_at=datetime.now(timezone.utc),
        )
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ge=1,
        description="Stable identifier, never reused within a list"
    )

    name: str = Field(
        description="What needs to be done"
    )

    priority: int = Field(
        ge=MIN_PRIORITY,
        le=MAX_PRIORITY,
        description="Urgency from 1 (lowest) to 5 (most urgent)"
    )

    created_at: datetime = Field(
        description="When the task was added (UTC)"
    )

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps cannot be compared with aware ones when sorting.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class TodoList(BaseModel):
    """
    The persisted form of a task store.

    LEARNING NOTE:
    next_id is stored alongside the tasks instead of being recomputed
    from them. After removing the newest task, max(id) + 1 would hand
    out that task's id again.
    """

    next_id: int = Field(
        default=1,
        ge=1,
        description="Id the next added task will receive"
    )

    tasks: list[Task] = Field(
        default_factory=list,
        description="Tasks in insertion (and therefore id) order"
    )

    @model_validator(mode="after")
    def _check_ids(self) -> "TodoList":
        ids = [task.id for task in self.tasks]
        for previous, current in zip(ids, ids[1:]):
            if current <= previous:
                raise ValueError(
                    f"task ids must be unique and increasing (got {previous} then {current})"
                )
        if ids and self.next_id <= ids[-1]:
            raise ValueError(
                f"next_id {self.next_id} must be greater than the last task id {ids[-1]}"
            )
        return self
