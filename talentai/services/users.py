# talentai/services/users.py
import logging

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talentai.core.errors import ConflictError
from talentai.models.enums import UserRole
from talentai.models.user import User
from talentai.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def create_user(db: Session, payload: UserCreate) -> User:
    existing = db.execute(select(User.id).where(User.email == payload.email)).scalar()
    if existing:
        raise ConflictError(f"User with email {payload.email} already exists")

    user = User(**payload.model_dump())
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # lost a race against a concurrent insert of the same email
        db.rollback()
        raise ConflictError(f"User with email {payload.email} already exists") from exc
    db.refresh(user)
    logger.info("created user %s (%s)", user.id, user.role.value)
    return user


def get_users(db: Session, role: UserRole | None = None) -> list[User]:
    stmt = select(User)
    if role is not None:
        stmt = stmt.where(User.role == role)
    stmt = stmt.order_by(desc(User.created_at), desc(User.id))
    return list(db.execute(stmt).scalars().all())
