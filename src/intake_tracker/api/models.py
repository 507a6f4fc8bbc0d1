"""Pydantic models for request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field


class IntakeChange(BaseModel):
    """Notification that a user's intake entries were written."""

    changed_at: datetime | None = Field(default=None, alias="changedAt")
    entry_ids: list[int] = Field(default_factory=list, alias="entryIds")
