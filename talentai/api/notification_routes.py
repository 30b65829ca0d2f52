# talentai/api/notification_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentai.db.session import get_db
from talentai.notifications.email import EmailSender, get_email_sender
from talentai.schemas.notification import EmailSendResult, NotificationCreate, NotificationOut
from talentai.services import notifications

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.post("", response_model=NotificationOut, status_code=201)
def create_notification(payload: NotificationCreate, db: Session = Depends(get_db)):
    return notifications.create_notification(db, payload)

@router.get("/user/{user_id}", response_model=list[NotificationOut], summary="A user's notifications (newest first)")
def get_user_notifications(user_id: int, unread_only: bool = False, db: Session = Depends(get_db)):
    return notifications.get_user_notifications(db, user_id, unread_only=unread_only)

@router.post("/{notification_id}/read", response_model=NotificationOut)
def mark_notification_as_read(notification_id: int, db: Session = Depends(get_db)):
    return notifications.mark_notification_as_read(db, notification_id)

@router.post("/{notification_id}/send-email", response_model=EmailSendResult)
def send_email_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    sender: EmailSender = Depends(get_email_sender),
):
    return EmailSendResult(sent=notifications.send_email_notification(db, notification_id, sender))
