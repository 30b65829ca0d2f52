# talentai/db/seed.py
from sqlalchemy.orm import Session
from sqlalchemy import select
from talentai.models.enums import UserRole
from talentai.models.user import User

# email, first, last, role, department, phone
SEED_USERS = [
    ("admin@talentai.com", "Sarah", "Johnson", UserRole.ADMIN, "Human Resources", "+1-555-0101"),
    ("john.doe@company.com", "John", "Doe", UserRole.REQUESTER, "Engineering", "+1-555-0102"),
    ("jane.smith@company.com", "Jane", "Smith", UserRole.REQUESTER, "Product", "+1-555-0103"),
    ("alex.candidate@email.com", "Alex", "Rodriguez", UserRole.CANDIDATE, None, "+1-555-0104"),
    ("emily.candidate@email.com", "Emily", "Chen", UserRole.CANDIDATE, None, "+1-555-0105"),
    ("mike.manager@company.com", "Mike", "Wilson", UserRole.REQUESTER, "Marketing", "+1-555-0106"),
]

def seed_demo_users(db: Session) -> int:
    # if already seeded, skip
    existing = db.execute(select(User)).scalars().first()
    if existing:
        return 0
    for email, first, last, role, dept, phone in SEED_USERS:
        db.add(User(email=email, first_name=first, last_name=last, role=role,
                    department=dept, phone=phone))
    db.commit()
    return len(SEED_USERS)
