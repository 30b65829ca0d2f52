# talentai/api/dashboard_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.schemas.dashboard import AdminDashboard, CandidateDashboard, RequesterDashboard
from talentai.services import dashboards

router = APIRouter(prefix="/dashboards", tags=["Dashboards"])

@router.get("/candidate/{candidate_id}", response_model=CandidateDashboard)
def get_candidate_dashboard(candidate_id: int, db: Session = Depends(get_db)):
    return dashboards.get_candidate_dashboard(db, candidate_id)

@router.get("/requester/{requester_id}", response_model=RequesterDashboard)
def get_requester_dashboard(requester_id: int, db: Session = Depends(get_db)):
    return dashboards.get_requester_dashboard(db, requester_id)

@router.get("/admin", response_model=AdminDashboard)
def get_admin_dashboard(db: Session = Depends(get_db)):
    return dashboards.get_admin_dashboard(db)
