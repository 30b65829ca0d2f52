# talentai/services/jobs.py
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from talentai.core.clock import utcnow
from talentai.core.workflow import check_transition
from talentai.models.enums import JobStatus
from talentai.models.job import Job
from talentai.models.user import User
from talentai.schemas.job import JobCreate, JobStatusUpdate
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)


def create_job(db: Session, payload: JobCreate) -> Job:
    """New postings always start as drafts and go through approval."""
    get_or_raise(db, User, payload.created_by)

    job = Job(**payload.model_dump(), status=JobStatus.DRAFT)
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("created job %s by user %s", job.id, job.created_by)
    return job


def get_jobs(db: Session) -> list[Job]:
    return list(db.execute(select(Job)).scalars().all())


def get_jobs_by_status(
    db: Session, status: JobStatus | None = None, created_by: int | None = None
) -> list[Job]:
    stmt = select(Job)
    if status is not None:
        stmt = stmt.where(Job.status == status)
    if created_by is not None:
        stmt = stmt.where(Job.created_by == created_by)
    return list(db.execute(stmt).scalars().all())


def update_job_status(db: Session, job_id: int, payload: JobStatusUpdate) -> Job:
    """
    Move a job to ``payload.status``. Derived fields depend on the target only:
    approved records the approver (when given), published/closed stamp their
    timestamps. Nothing is cleared on other targets.
    """
    job = get_or_raise(db, Job, job_id)
    check_transition("Job", job.status, payload.status)
    if payload.status == JobStatus.APPROVED and payload.approved_by is not None:
        get_or_raise(db, User, payload.approved_by, "Approver")

    now = utcnow()
    job.status = payload.status
    job.updated_at = now

    if payload.status == JobStatus.APPROVED and payload.approved_by is not None:
        job.approved_by = payload.approved_by
    elif payload.status == JobStatus.PUBLISHED:
        job.published_at = now
    elif payload.status == JobStatus.CLOSED:
        job.closed_at = now

    db.commit()
    db.refresh(job)
    logger.info("job %s -> %s", job.id, job.status.value)
    return job
