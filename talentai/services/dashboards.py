# talentai/services/dashboards.py
"""Read-only aggregations behind the three role dashboards."""
import math
from datetime import timedelta

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session, aliased

from talentai.core.clock import utcnow
from talentai.models.application import Application
from talentai.models.cv import AIParsedData
from talentai.models.enums import (
    ApplicationStatus,
    InterviewStatus,
    JobStatus,
    ProcessingStatus,
)
from talentai.models.interview import Interview
from talentai.models.job import Job
from talentai.models.user import User
from talentai.schemas.dashboard import (
    ActivityItem,
    AdminDashboard,
    ApplicationStatusCount,
    CandidateApplicationSummary,
    CandidateDashboard,
    JobStatusCount,
    RequesterApplicationSummary,
    RequesterDashboard,
    RoleCount,
    SystemMetrics,
    UpcomingInterview,
    WeeklyMetrics,
)

CANDIDATE_RECENT_LIMIT = 5
REQUESTER_RECENT_LIMIT = 10
ACTIVITY_SOURCE_LIMIT = 5
ACTIVITY_LIMIT = 10
WEEKLY_WINDOW = timedelta(days=7)

# statuses that take an application out of the pipeline
CLOSED_APPLICATION_STATUSES = (
    ApplicationStatus.REJECTED,
    ApplicationStatus.HIRED,
    ApplicationStatus.OFFER_REJECTED,
)
AI_QUEUE_STATUSES = (ProcessingStatus.PENDING, ProcessingStatus.PROCESSING)


def _count(db: Session, stmt) -> int:
    return db.execute(stmt).scalar_one() or 0


def _full_name(user):
    return user.first_name + " " + user.last_name


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ---------------------------
# Candidate
# ---------------------------

def get_candidate_dashboard(db: Session, candidate_id: int) -> CandidateDashboard:
    now = utcnow()
    mine = Application.candidate_id == candidate_id
    app_count = select(func.count(Application.id)).where(mine)

    upcoming = (
        Application.candidate_id == candidate_id,
        Interview.status == InterviewStatus.SCHEDULED,
        Interview.scheduled_at >= now,
    )

    upcoming_count = _count(
        db,
        select(func.count(Interview.id))
        .join(Application, Interview.application_id == Application.id)
        .where(*upcoming),
    )

    recent_rows = db.execute(
        select(
            Application.id,
            Application.job_id,
            Job.title.label("job_title"),
            Job.department,
            Application.status,
            Application.ai_match_score,
            Application.created_at,
        )
        .join(Job, Application.job_id == Job.id)
        .where(mine)
        .order_by(desc(Application.created_at), desc(Application.id))
        .limit(CANDIDATE_RECENT_LIMIT)
    ).mappings().all()

    interviewer = aliased(User)
    schedule_rows = db.execute(
        select(
            Interview.id,
            Interview.application_id,
            Job.title.label("job_title"),
            Interview.scheduled_at,
            Interview.duration_minutes,
            Interview.location,
            Interview.meeting_link,
            _full_name(interviewer).label("interviewer_name"),
        )
        .join(Application, Interview.application_id == Application.id)
        .join(Job, Application.job_id == Job.id)
        .join(interviewer, Interview.interviewer_id == interviewer.id)
        .where(*upcoming)
        .order_by(Interview.scheduled_at, Interview.id)
    ).mappings().all()

    return CandidateDashboard(
        total_applications=_count(db, app_count),
        pending_applications=_count(db, app_count.where(Application.status == ApplicationStatus.PENDING)),
        shortlisted_applications=_count(db, app_count.where(Application.status == ApplicationStatus.SHORTLISTED)),
        upcoming_interviews=upcoming_count,
        recent_applications=[CandidateApplicationSummary(**r) for r in recent_rows],
        upcoming_interview_schedules=[UpcomingInterview(**r) for r in schedule_rows],
    )


# ---------------------------
# Requester
# ---------------------------

def get_requester_dashboard(db: Session, requester_id: int) -> RequesterDashboard:
    owned = Job.created_by == requester_id
    job_count = select(func.count(Job.id)).where(owned)
    app_count = select(func.count(Application.id)).join(Job, Application.job_id == Job.id).where(owned)
    week_ago = utcnow() - WEEKLY_WINDOW

    avg_score = db.execute(
        select(func.avg(Application.ai_match_score))
        .join(Job, Application.job_id == Job.id)
        .where(owned, Application.ai_match_score.is_not(None))
    ).scalar()

    candidate = aliased(User)
    recent_rows = db.execute(
        select(
            Application.id,
            Application.job_id,
            Job.title.label("job_title"),
            Application.candidate_id,
            _full_name(candidate).label("candidate_name"),
            Application.status,
            Application.ai_match_score,
            Application.created_at,
        )
        .join(Job, Application.job_id == Job.id)
        .join(candidate, Application.candidate_id == candidate.id)
        .where(owned)
        .order_by(desc(Application.created_at), desc(Application.id))
        .limit(REQUESTER_RECENT_LIMIT)
    ).mappings().all()

    weekly_interviews = _count(
        db,
        select(func.count(Interview.id))
        .join(Application, Interview.application_id == Application.id)
        .join(Job, Application.job_id == Job.id)
        .where(owned, Interview.created_at >= week_ago),
    )

    return RequesterDashboard(
        total_job_postings=_count(db, job_count),
        pending_approvals=_count(db, job_count.where(Job.status == JobStatus.PENDING_APPROVAL)),
        active_job_postings=_count(db, job_count.where(Job.status == JobStatus.PUBLISHED)),
        total_applications_received=_count(db, app_count),
        candidates_in_pipeline=_count(
            db, app_count.where(Application.status.not_in(CLOSED_APPLICATION_STATUSES))
        ),
        average_match_score=round_half_up(float(avg_score)) if avg_score is not None else 0,
        recent_applications=[RequesterApplicationSummary(**r) for r in recent_rows],
        weekly_metrics=WeeklyMetrics(
            applications=_count(db, app_count.where(Application.created_at >= week_ago)),
            interviews=weekly_interviews,
        ),
    )


# ---------------------------
# Admin
# ---------------------------

def _grouped(db: Session, column):
    return db.execute(
        select(column, func.count()).group_by(column).order_by(column)
    ).all()


def get_admin_dashboard(db: Session) -> AdminDashboard:
    system_metrics = SystemMetrics(
        users_by_role=[RoleCount(role=r, count=c) for r, c in _grouped(db, User.role)],
        applications_by_status=[
            ApplicationStatusCount(status=s, count=c) for s, c in _grouped(db, Application.status)
        ],
        jobs_by_status=[JobStatusCount(status=s, count=c) for s, c in _grouped(db, Job.status)],
    )

    creator = aliased(User)
    job_rows = db.execute(
        select(Job.id, Job.title, _full_name(creator).label("user_name"), Job.created_at)
        .join(creator, Job.created_by == creator.id)
        .order_by(desc(Job.created_at), desc(Job.id))
        .limit(ACTIVITY_SOURCE_LIMIT)
    ).mappings().all()

    applicant = aliased(User)
    app_rows = db.execute(
        select(Application.id, Job.title, _full_name(applicant).label("user_name"), Application.created_at)
        .join(Job, Application.job_id == Job.id)
        .join(applicant, Application.candidate_id == applicant.id)
        .order_by(desc(Application.created_at), desc(Application.id))
        .limit(ACTIVITY_SOURCE_LIMIT)
    ).mappings().all()

    activity = [ActivityItem(type="job", **r) for r in job_rows]
    activity += [ActivityItem(type="application", **r) for r in app_rows]
    activity.sort(key=lambda a: a.created_at, reverse=True)

    return AdminDashboard(
        total_users=_count(db, select(func.count(User.id))),
        total_jobs=_count(db, select(func.count(Job.id))),
        total_applications=_count(db, select(func.count(Application.id))),
        pending_job_approvals=_count(
            db, select(func.count(Job.id)).where(Job.status == JobStatus.PENDING_APPROVAL)
        ),
        ai_processing_queue=_count(
            db,
            select(func.count(AIParsedData.id)).where(AIParsedData.processing_status.in_(AI_QUEUE_STATUSES)),
        ),
        system_metrics=system_metrics,
        recent_activity=activity[:ACTIVITY_LIMIT],
    )
