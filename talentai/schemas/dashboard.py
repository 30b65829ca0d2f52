# talentai/schemas/dashboard.py
from datetime import datetime
from typing import Literal
from pydantic import BaseModel
from talentai.models.enums import ApplicationStatus, JobStatus, UserRole

# ---------- Candidate ----------

class CandidateApplicationSummary(BaseModel):
    id: int
    job_id: int
    job_title: str
    department: str
    status: ApplicationStatus
    ai_match_score: int | None
    created_at: datetime

class UpcomingInterview(BaseModel):
    id: int
    application_id: int
    job_title: str
    scheduled_at: datetime
    duration_minutes: int
    location: str | None
    meeting_link: str | None
    interviewer_name: str

class CandidateDashboard(BaseModel):
    total_applications: int
    pending_applications: int
    shortlisted_applications: int
    upcoming_interviews: int
    recent_applications: list[CandidateApplicationSummary]
    upcoming_interview_schedules: list[UpcomingInterview]

# ---------- Requester ----------

class RequesterApplicationSummary(BaseModel):
    id: int
    job_id: int
    job_title: str
    candidate_id: int
    candidate_name: str
    status: ApplicationStatus
    ai_match_score: int | None
    created_at: datetime

class WeeklyMetrics(BaseModel):
    applications: int
    interviews: int

class RequesterDashboard(BaseModel):
    total_job_postings: int
    pending_approvals: int
    active_job_postings: int
    total_applications_received: int
    candidates_in_pipeline: int
    average_match_score: int
    recent_applications: list[RequesterApplicationSummary]
    weekly_metrics: WeeklyMetrics

# ---------- Admin ----------

class RoleCount(BaseModel):
    role: UserRole
    count: int

class ApplicationStatusCount(BaseModel):
    status: ApplicationStatus
    count: int

class JobStatusCount(BaseModel):
    status: JobStatus
    count: int

class SystemMetrics(BaseModel):
    users_by_role: list[RoleCount]
    applications_by_status: list[ApplicationStatusCount]
    jobs_by_status: list[JobStatusCount]

class ActivityItem(BaseModel):
    type: Literal["job", "application"]
    id: int
    title: str
    user_name: str
    created_at: datetime

class AdminDashboard(BaseModel):
    total_users: int
    total_jobs: int
    total_applications: int
    pending_job_approvals: int
    ai_processing_queue: int
    system_metrics: SystemMetrics
    recent_activity: list[ActivityItem]
