# talentai/api/user_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.models.enums import UserRole
from talentai.schemas.user import UserCreate, UserOut
from talentai.services import users

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("", response_model=UserOut, status_code=201, summary="Create a user")
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return users.create_user(db, payload)

@router.get("", response_model=list[UserOut], summary="List users (newest first)")
def get_users(role: UserRole | None = None, db: Session = Depends(get_db)):
    return users.get_users(db, role=role)
