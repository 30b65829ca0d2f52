# talentai/services/applications.py
import logging

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from talentai.core.clock import utcnow
from talentai.core.errors import RuleViolationError
from talentai.core.workflow import check_transition
from talentai.models.application import Application
from talentai.models.cv import CVFile
from talentai.models.enums import ApplicationStatus
from talentai.models.job import Job
from talentai.models.user import User
from talentai.schemas.application import ApplicationCreate, ApplicationStatusUpdate
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (desc(Application.created_at), desc(Application.id))


def create_application(db: Session, payload: ApplicationCreate) -> Application:
    get_or_raise(db, Job, payload.job_id)
    get_or_raise(db, User, payload.candidate_id, "Candidate")
    cv_file = get_or_raise(db, CVFile, payload.cv_file_id, "CV file")
    if cv_file.candidate_id != payload.candidate_id:
        raise RuleViolationError(
            f"CV file with id {cv_file.id} does not belong to candidate {payload.candidate_id}"
        )

    application = Application(
        **payload.model_dump(),
        status=ApplicationStatus.PENDING,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    logger.info("application %s: candidate %s -> job %s",
                application.id, application.candidate_id, application.job_id)
    return application


def get_applications(db: Session) -> list[Application]:
    return list(db.execute(select(Application).order_by(*_NEWEST_FIRST)).scalars().all())


def get_applications_by_job(db: Session, job_id: int) -> list[Application]:
    """Best match first; unscored applications last; newest first within a score."""
    stmt = (
        select(Application)
        .where(Application.job_id == job_id)
        .order_by(
            Application.ai_match_score.is_(None),
            desc(Application.ai_match_score),
            *_NEWEST_FIRST,
        )
    )
    return list(db.execute(stmt).scalars().all())


def get_candidate_applications(db: Session, candidate_id: int) -> list[Application]:
    stmt = (
        select(Application)
        .where(Application.candidate_id == candidate_id)
        .order_by(*_NEWEST_FIRST)
    )
    return list(db.execute(stmt).scalars().all())


def update_application_status(
    db: Session, application_id: int, payload: ApplicationStatusUpdate
) -> Application:
    application = get_or_raise(db, Application, application_id)
    check_transition("Application", application.status, payload.status)

    application.status = payload.status
    application.updated_at = utcnow()
    if "notes" in payload.model_fields_set:
        application.notes = payload.notes

    db.commit()
    db.refresh(application)
    logger.info("application %s -> %s", application.id, application.status.value)
    return application
