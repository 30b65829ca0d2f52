# talentai/api/report_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.schemas.report import ReportOut, WeeklyReportRequest
from talentai.services import reports

router = APIRouter(prefix="/reports", tags=["Reports"])

@router.post("/weekly", response_model=ReportOut, status_code=201, summary="Generate a weekly recruitment report")
def generate_weekly_report(payload: WeeklyReportRequest, db: Session = Depends(get_db)):
    return reports.generate_weekly_report(db, payload.requester_id, payload.week_start, payload.week_end)

@router.get("/requester/{requester_id}", response_model=list[ReportOut], summary="A requester's reports (oldest first)")
def get_reports_by_requester(requester_id: int, db: Session = Depends(get_db)):
    return reports.get_reports_by_requester(db, requester_id)
