# talentai/services/interviews.py
import logging

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talentai.core.clock import utcnow
from talentai.core.workflow import check_transition
from talentai.models.application import Application
from talentai.models.enums import ApplicationStatus, InterviewStatus, NotificationType
from talentai.models.interview import Interview
from talentai.models.notification import Notification
from talentai.models.user import User
from talentai.schemas.interview import InterviewSchedule, InterviewUpdate
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)

_LATEST_SLOT_FIRST = (desc(Interview.scheduled_at), desc(Interview.id))


def _when(interview: Interview) -> str:
    return interview.scheduled_at.strftime("%Y-%m-%d %H:%M UTC")


def schedule_interview(db: Session, payload: InterviewSchedule) -> Interview:
    """
    Book an interview as one unit of work: the interview row, the parent
    application moving to interview_scheduled, and an invitation for both the
    candidate and the interviewer. Everything is validated before the first
    write and committed once, so a failure leaves nothing behind.
    """
    application = get_or_raise(db, Application, payload.application_id)
    get_or_raise(db, User, payload.interviewer_id, "Interviewer")
    job_title = application.job.title

    now = utcnow()
    interview = Interview(
        **payload.model_dump(),
        status=InterviewStatus.SCHEDULED,
        created_at=now,
        updated_at=now,
    )
    application.status = ApplicationStatus.INTERVIEW_SCHEDULED
    application.updated_at = now

    where = payload.location or payload.meeting_link or "details to follow"
    db.add_all([
        interview,
        Notification(
            user_id=application.candidate_id,
            type=NotificationType.INTERVIEW_INVITATION,
            title="Interview Scheduled",
            message=(
                f"An interview has been scheduled for your application to {job_title} "
                f"on {_when(interview)} ({payload.duration_minutes} min, {where})."
            ),
            email_sent=False,
        ),
        Notification(
            user_id=payload.interviewer_id,
            type=NotificationType.INTERVIEW_INVITATION,
            title="Interview Assignment",
            message=(
                f"You have been assigned to conduct an interview for {job_title} "
                f"on {_when(interview)} ({payload.duration_minutes} min, {where})."
            ),
            email_sent=False,
        ),
    ])

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(interview)
    logger.info("interview %s scheduled for application %s", interview.id, application.id)
    return interview


def get_interviews(db: Session) -> list[Interview]:
    return list(db.execute(select(Interview).order_by(*_LATEST_SLOT_FIRST)).scalars().all())


def get_interviews_by_candidate(db: Session, candidate_id: int) -> list[Interview]:
    stmt = (
        select(Interview)
        .join(Application, Interview.application_id == Application.id)
        .where(Application.candidate_id == candidate_id)
        .order_by(*_LATEST_SLOT_FIRST)
    )
    return list(db.execute(stmt).scalars().all())


def get_interviews_by_interviewer(db: Session, interviewer_id: int) -> list[Interview]:
    stmt = (
        select(Interview)
        .where(Interview.interviewer_id == interviewer_id)
        .order_by(*_LATEST_SLOT_FIRST)
    )
    return list(db.execute(stmt).scalars().all())


def update_interview(db: Session, interview_id: int, payload: InterviewUpdate) -> Interview:
    """Write only the fields present in the payload; completing cascades to the application."""
    interview = get_or_raise(db, Interview, interview_id)
    changes = payload.model_dump(include=payload.model_fields_set)

    if "status" in changes:
        if changes["status"] is None:
            changes.pop("status")
        else:
            check_transition("Interview", interview.status, changes["status"])

    now = utcnow()
    for field, value in changes.items():
        setattr(interview, field, value)
    interview.updated_at = now

    if changes.get("status") == InterviewStatus.COMPLETED:
        application = interview.application
        application.status = ApplicationStatus.INTERVIEWED
        application.updated_at = now

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(interview)
    logger.info("interview %s updated: %s", interview.id, sorted(changes))
    return interview
