# talentai/api/cv_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.cv.parsers import CVParser, get_cv_parser
from talentai.db.session import get_db
from talentai.schemas.cv import AIParsedDataOut, CVFileOut, CVUpload
from talentai.services import cvs

router = APIRouter(prefix="/cvs", tags=["CVs"])

@router.post("", response_model=CVFileOut, status_code=201, summary="Register an uploaded CV file")
def upload_cv(payload: CVUpload, db: Session = Depends(get_db)):
    return cvs.upload_cv(db, payload)

@router.post("/{cv_file_id}/process", response_model=AIParsedDataOut, summary="Parse a CV (idempotent)")
def process_cv_with_ai(
    cv_file_id: int,
    db: Session = Depends(get_db),
    parser: CVParser = Depends(get_cv_parser),
):
    return cvs.process_cv_with_ai(db, cv_file_id, parser)

@router.get("/{cv_file_id}/parsed", response_model=AIParsedDataOut | None, summary="Parsed CV data, if any")
def get_cv_parsed_data(cv_file_id: int, db: Session = Depends(get_db)):
    return cvs.get_cv_parsed_data(db, cv_file_id)
