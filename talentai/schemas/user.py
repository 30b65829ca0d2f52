# talentai/schemas/user.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr
from talentai.models.enums import UserRole

class UserCreate(BaseModel):
    email: EmailStr
    first_name: str
    last_name: str
    role: UserRole
    department: str | None = None
    phone: str | None = None

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # read straight from ORM rows

    id: int
    email: EmailStr
    first_name: str
    last_name: str
    role: UserRole
    department: str | None
    phone: str | None
    created_at: datetime
    updated_at: datetime
