# talentai/schemas/interview.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from talentai.core.clock import as_naive_utc
from talentai.models.enums import InterviewStatus

class InterviewSchedule(BaseModel):
    application_id: int
    interviewer_id: int
    scheduled_at: datetime
    duration_minutes: int = Field(gt=0)
    location: str | None = None
    meeting_link: str | None = None

    @field_validator("scheduled_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_naive_utc(v)

class InterviewUpdate(BaseModel):
    """Partial update: only the fields present in the payload are written."""
    status: InterviewStatus | None = None
    notes: str | None = None
    feedback: str | None = None

class InterviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    application_id: int
    interviewer_id: int
    scheduled_at: datetime
    duration_minutes: int
    location: str | None
    meeting_link: str | None
    status: InterviewStatus
    notes: str | None
    feedback: str | None
    created_at: datetime
    updated_at: datetime
