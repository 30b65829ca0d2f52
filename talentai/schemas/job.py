# talentai/schemas/job.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from talentai.models.enums import JobStatus

class JobCreate(BaseModel):
    title: str
    description: str
    requirements: str
    department: str
    location: str | None = None
    salary_range: str | None = None
    employment_type: str
    created_by: int

class JobStatusUpdate(BaseModel):
    status: JobStatus
    approved_by: int | None = None

class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    requirements: str
    department: str
    location: str | None
    salary_range: str | None
    employment_type: str
    status: JobStatus
    created_by: int
    approved_by: int | None
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None
    closed_at: datetime | None
