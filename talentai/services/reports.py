# talentai/services/reports.py
import logging
from datetime import datetime

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from talentai.models.application import Application
from talentai.models.enums import ApplicationStatus
from talentai.models.interview import Interview
from talentai.models.job import Job
from talentai.models.report import Report
from talentai.models.user import User
from talentai.schemas.report import WeeklyReportMetrics
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)

REPORT_TYPE_WEEKLY = "weekly"
_SECONDS_PER_DAY = 86400


def _in_window(column, start: datetime, end: datetime):
    return and_(column >= start, column < end)


def _count(db: Session, stmt) -> int:
    return db.execute(stmt).scalar_one() or 0


def compute_weekly_metrics(
    db: Session, requester_id: int, week_start: datetime, week_end: datetime
) -> WeeklyReportMetrics:
    """
    Recruitment metrics over the requester's jobs for [week_start, week_end).

    Offers are counted by current status: an offer that has since been
    accepted counts as accepted only, not as extended. The acceptance rate is
    accepted / extended, so a week with more acceptances than open offers
    reports a rate above 100.
    """
    owned = Job.created_by == requester_id
    apps = select(func.count(Application.id)).join(Job, Application.job_id == Job.id).where(owned)
    created_in_week = _in_window(Application.created_at, week_start, week_end)
    moved_in_week = _in_window(Application.updated_at, week_start, week_end)

    total = _count(db, apps.where(created_in_week))
    shortlisted = _count(
        db, apps.where(created_in_week, Application.status == ApplicationStatus.SHORTLISTED)
    )
    offers_extended = _count(
        db, apps.where(moved_in_week, Application.status == ApplicationStatus.OFFER_MADE)
    )
    offers_accepted = _count(
        db, apps.where(moved_in_week, Application.status == ApplicationStatus.OFFER_ACCEPTED)
    )
    interviews = _count(
        db,
        select(func.count(Interview.id))
        .join(Application, Interview.application_id == Application.id)
        .join(Job, Application.job_id == Job.id)
        .where(owned, _in_window(Interview.created_at, week_start, week_end)),
    )

    avg_score = db.execute(
        select(func.avg(Application.ai_match_score))
        .join(Job, Application.job_id == Job.id)
        .where(owned, created_in_week, Application.ai_match_score.is_not(None))
    ).scalar()

    # time-to-fill: job opened -> offer accepted
    fill_rows = db.execute(
        select(Job.created_at, Application.updated_at)
        .join(Job, Application.job_id == Job.id)
        .where(owned, moved_in_week, Application.status == ApplicationStatus.OFFER_ACCEPTED)
    ).all()
    fill_days = [
        (accepted - opened).total_seconds() / _SECONDS_PER_DAY for opened, accepted in fill_rows
    ]

    acceptance = offers_accepted / offers_extended * 100 if offers_extended else 0.0

    return WeeklyReportMetrics(
        total_applications=total,
        shortlisted_applications=shortlisted,
        interviews_scheduled=interviews,
        offers_extended=offers_extended,
        offers_accepted=offers_accepted,
        offer_acceptance_rate=round(acceptance, 2),
        average_match_score=round(float(avg_score), 2) if avg_score is not None else 0.0,
        time_to_fill_days=round(sum(fill_days) / len(fill_days), 2) if fill_days else 0.0,
    )


def generate_weekly_report(
    db: Session, requester_id: int, week_start: datetime, week_end: datetime
) -> Report:
    """Compute and persist a weekly report. Every call adds a new row."""
    get_or_raise(db, User, requester_id, "Requester")
    metrics = compute_weekly_metrics(db, requester_id, week_start, week_end)

    report = Report(
        requester_id=requester_id,
        report_type=REPORT_TYPE_WEEKLY,
        report_data=metrics.model_dump(),
        file_path=None,
        week_start=week_start,
        week_end=week_end,
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    logger.info("weekly report %s for requester %s (%s -> %s)",
                report.id, requester_id, week_start.date(), week_end.date())
    return report


def get_reports_by_requester(db: Session, requester_id: int) -> list[Report]:
    stmt = (
        select(Report)
        .where(Report.requester_id == requester_id)
        .order_by(Report.generated_at, Report.id)
    )
    return list(db.execute(stmt).scalars().all())
