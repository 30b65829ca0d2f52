# talentai/api/interview_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.schemas.interview import InterviewOut, InterviewSchedule, InterviewUpdate
from talentai.services import interviews

router = APIRouter(prefix="/interviews", tags=["Interviews"])

@router.post("", response_model=InterviewOut, status_code=201, summary="Schedule an interview")
def schedule_interview(payload: InterviewSchedule, db: Session = Depends(get_db)):
    return interviews.schedule_interview(db, payload)

@router.get("", response_model=list[InterviewOut], summary="List interviews (latest slot first)")
def get_interviews(db: Session = Depends(get_db)):
    return interviews.get_interviews(db)

@router.get("/candidate/{candidate_id}", response_model=list[InterviewOut])
def get_interviews_by_candidate(candidate_id: int, db: Session = Depends(get_db)):
    return interviews.get_interviews_by_candidate(db, candidate_id)

@router.get("/interviewer/{interviewer_id}", response_model=list[InterviewOut])
def get_interviews_by_interviewer(interviewer_id: int, db: Session = Depends(get_db)):
    return interviews.get_interviews_by_interviewer(db, interviewer_id)

@router.patch("/{interview_id}", response_model=InterviewOut, summary="Partially update an interview")
def update_interview(interview_id: int, payload: InterviewUpdate, db: Session = Depends(get_db)):
    return interviews.update_interview(db, interview_id, payload)
