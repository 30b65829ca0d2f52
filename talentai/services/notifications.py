# talentai/services/notifications.py
import logging

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from talentai.core.clock import utcnow
from talentai.models.notification import Notification
from talentai.models.user import User
from talentai.notifications.email import EmailSender
from talentai.schemas.notification import NotificationCreate
from talentai.services.lookup import get_or_raise

logger = logging.getLogger(__name__)


def create_notification(db: Session, payload: NotificationCreate) -> Notification:
    get_or_raise(db, User, payload.user_id)

    notification = Notification(**payload.model_dump(), email_sent=False, read_at=None)
    db.add(notification)
    db.commit()
    db.refresh(notification)
    logger.info("notification %s (%s) for user %s",
                notification.id, notification.type.value, notification.user_id)
    return notification


def get_user_notifications(db: Session, user_id: int, unread_only: bool = False) -> list[Notification]:
    stmt = select(Notification).where(Notification.user_id == user_id)
    if unread_only:
        stmt = stmt.where(Notification.read_at.is_(None))
    stmt = stmt.order_by(desc(Notification.created_at), desc(Notification.id))
    return list(db.execute(stmt).scalars().all())


def mark_notification_as_read(db: Session, notification_id: int) -> Notification:
    """Always stamps the current time, even when the notification was already read."""
    notification = get_or_raise(db, Notification, notification_id)
    notification.read_at = utcnow()
    db.commit()
    db.refresh(notification)
    return notification


def send_email_notification(db: Session, notification_id: int, sender: EmailSender) -> bool:
    """Deliver once. A failed delivery leaves email_sent false so the call can be retried."""
    notification = get_or_raise(db, Notification, notification_id)
    if notification.email_sent:
        return True

    sent = sender.send(notification.user.email, notification.title, notification.message)
    if not sent:
        logger.warning("notification %s: email to user %s was not delivered",
                       notification.id, notification.user_id)
        return False

    notification.email_sent = True
    db.commit()
    logger.info("notification %s emailed to user %s", notification.id, notification.user_id)
    return True
