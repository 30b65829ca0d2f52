# talentai/api/application_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.schemas.application import ApplicationCreate, ApplicationOut, ApplicationStatusUpdate
from talentai.services import applications

router = APIRouter(prefix="/applications", tags=["Applications"])

@router.post("", response_model=ApplicationOut, status_code=201, summary="Apply to a job")
def create_application(payload: ApplicationCreate, db: Session = Depends(get_db)):
    return applications.create_application(db, payload)

@router.get("", response_model=list[ApplicationOut], summary="List applications (newest first)")
def get_applications(db: Session = Depends(get_db)):
    return applications.get_applications(db)

@router.get("/job/{job_id}", response_model=list[ApplicationOut], summary="Applications for a job, best match first")
def get_applications_by_job(job_id: int, db: Session = Depends(get_db)):
    return applications.get_applications_by_job(db, job_id)

@router.get("/candidate/{candidate_id}", response_model=list[ApplicationOut], summary="A candidate's applications")
def get_candidate_applications(candidate_id: int, db: Session = Depends(get_db)):
    return applications.get_candidate_applications(db, candidate_id)

@router.patch("/{application_id}/status", response_model=ApplicationOut, summary="Change application status")
def update_application_status(
    application_id: int, payload: ApplicationStatusUpdate, db: Session = Depends(get_db)
):
    return applications.update_application_status(db, application_id, payload)
