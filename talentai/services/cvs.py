# talentai/services/cvs.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talentai.core.clock import utcnow
from talentai.core.errors import CVProcessingError, RuleViolationError
from talentai.cv.parsers import CVParser
from talentai.models.cv import AIParsedData, CVFile
from talentai.models.enums import ProcessingStatus, UserRole
from talentai.models.user import User
from talentai.schemas.cv import CVUpload
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)


def upload_cv(db: Session, payload: CVUpload) -> CVFile:
    candidate = get_or_raise(db, User, payload.candidate_id, "Candidate")
    if candidate.role != UserRole.CANDIDATE:
        raise RuleViolationError(f"User with id {candidate.id} is not a candidate")

    cv_file = CVFile(**payload.model_dump())
    db.add(cv_file)
    db.commit()
    db.refresh(cv_file)
    logger.info("stored CV %s for candidate %s", cv_file.id, cv_file.candidate_id)
    return cv_file


def get_cv_parsed_data(db: Session, cv_file_id: int) -> AIParsedData | None:
    return db.execute(
        select(AIParsedData)
        .where(AIParsedData.cv_file_id == cv_file_id)
        .order_by(AIParsedData.id)
    ).scalars().first()


def process_cv_with_ai(db: Session, cv_file_id: int, parser: CVParser) -> AIParsedData:
    """
    Parse a CV once. A file that already has a parsed-data row gets that row
    back unchanged, whatever its status. The unique cv_file_id settles two
    concurrent first calls: the loser returns the winner's row.
    """
    cv_file = get_or_raise(db, CVFile, cv_file_id, "CV file")

    existing = get_cv_parsed_data(db, cv_file_id)
    if existing is not None:
        return existing

    record = AIParsedData(
        cv_file_id=cv_file.id,
        parsed_data={},
        processing_status=ProcessingStatus.PROCESSING,
    )
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("CV %s already claimed by a concurrent request", cv_file.id)
        return get_cv_parsed_data(db, cv_file_id)

    try:
        parsed = parser.parse(cv_file)
    except Exception as exc:
        record.processing_status = ProcessingStatus.FAILED
        record.parsed_data = {"error": str(exc)}
        record.updated_at = utcnow()
        db.commit()
        logger.exception("CV %s parsing failed", cv_file.id)
        raise CVProcessingError(f"Processing CV file with id {cv_file.id} failed: {exc}") from exc

    record.parsed_data = parsed
    record.processing_status = ProcessingStatus.COMPLETED
    record.updated_at = utcnow()
    db.commit()
    db.refresh(record)
    logger.info("CV %s parsed (record %s)", cv_file.id, record.id)
    return record
