# talentai/schemas/report.py
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from talentai.core.clock import as_naive_utc

class WeeklyReportRequest(BaseModel):
    requester_id: int
    week_start: datetime
    week_end: datetime

    @field_validator("week_start", "week_end")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_naive_utc(v)

    @model_validator(mode="after")
    def _ordered(self):
        if self.week_end <= self.week_start:
            raise ValueError("week_end must be after week_start")
        return self

class WeeklyReportMetrics(BaseModel):
    total_applications: int = 0
    shortlisted_applications: int = 0
    interviews_scheduled: int = 0
    offers_extended: int = 0
    offers_accepted: int = 0
    offer_acceptance_rate: float = 0.0
    average_match_score: float = 0.0
    time_to_fill_days: float = 0.0

class ReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    requester_id: int
    report_type: str
    report_data: dict[str, Any]
    file_path: str | None
    generated_at: datetime
    week_start: datetime
    week_end: datetime
