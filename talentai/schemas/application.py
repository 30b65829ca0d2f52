# talentai/schemas/application.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from talentai.models.enums import ApplicationStatus

class ApplicationCreate(BaseModel):
    job_id: int
    candidate_id: int
    cv_file_id: int
    cover_letter: str | None = None

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    # Omitted leaves notes untouched; an explicit null clears them
    notes: str | None = None

class ApplicationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    job_id: int
    candidate_id: int
    cv_file_id: int
    ai_parsed_data_id: int | None
    status: ApplicationStatus
    ai_match_score: int | None
    cover_letter: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
