# talentai/schemas/notification.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from talentai.models.enums import NotificationType

class NotificationCreate(BaseModel):
    user_id: int
    type: NotificationType
    title: str
    message: str

class NotificationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: NotificationType
    title: str
    message: str
    email_sent: bool
    read_at: datetime | None
    created_at: datetime

class EmailSendResult(BaseModel):
    sent: bool
