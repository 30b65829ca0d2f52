# talentai/api/job_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.models.enums import JobStatus
from talentai.schemas.job import JobCreate, JobOut, JobStatusUpdate
from talentai.services import jobs

router = APIRouter(prefix="/jobs", tags=["Jobs"])

@router.post("", response_model=JobOut, status_code=201, summary="Create a draft job posting")
def create_job(payload: JobCreate, db: Session = Depends(get_db)):
    return jobs.create_job(db, payload)

@router.get("", response_model=list[JobOut], summary="List all jobs")
def get_jobs(db: Session = Depends(get_db)):
    return jobs.get_jobs(db)

@router.get("/search", response_model=list[JobOut], summary="Filter jobs by status and/or creator")
def get_jobs_by_status(
    status: JobStatus | None = None,
    created_by: int | None = None,
    db: Session = Depends(get_db),
):
    return jobs.get_jobs_by_status(db, status=status, created_by=created_by)

@router.patch("/{job_id}/status", response_model=JobOut, summary="Move a job through the approval workflow")
def update_job_status(job_id: int, payload: JobStatusUpdate, db: Session = Depends(get_db)):
    return jobs.update_job_status(db, job_id, payload)
