"""Tests for notifications: creation, inbox listing, read marks and email."""
from datetime import datetime

import pytest

from talentai.core.errors import NotFoundError
from talentai.models.enums import NotificationType
from talentai.notifications.email import LoggingEmailSender
from talentai.schemas.notification import NotificationCreate
from talentai.services.notifications import (
    create_notification,
    get_user_notifications,
    mark_notification_as_read,
    send_email_notification,
)


def _notify(db, user, title="Status changed"):
    return create_notification(db, NotificationCreate(
        user_id=user.id,
        type=NotificationType.APPLICATION_STATUS,
        title=title,
        message="Your application moved forward",
    ))


def test_create_notification_defaults(db, make_user):
    n = _notify(db, make_user())
    assert n.email_sent is False
    assert n.read_at is None
    assert n.created_at is not None


def test_create_notification_unknown_user(db):
    with pytest.raises(NotFoundError, match="User with id 50 not found"):
        create_notification(db, NotificationCreate(
            user_id=50, type=NotificationType.JOB_APPROVAL, title="t", message="m",
        ))


def test_inbox_newest_first_and_unread_filter(db, make_user):
    user = make_user()
    other = make_user()
    first = _notify(db, user, "first")
    second = _notify(db, user, "second")
    _notify(db, other, "not mine")

    assert [n.id for n in get_user_notifications(db, user.id)] == [second.id, first.id]

    mark_notification_as_read(db, first.id)
    unread = get_user_notifications(db, user.id, unread_only=True)
    assert [n.id for n in unread] == [second.id]
    assert len(get_user_notifications(db, user.id)) == 2


def test_mark_as_read_restamps(db, make_user, monkeypatch):
    n = _notify(db, make_user())
    ticks = iter([datetime(2025, 5, 1, 9, 0), datetime(2025, 5, 1, 9, 5)])
    monkeypatch.setattr("talentai.services.notifications.utcnow", lambda: next(ticks))

    first = mark_notification_as_read(db, n.id).read_at
    second = mark_notification_as_read(db, n.id).read_at

    assert first == datetime(2025, 5, 1, 9, 0)
    assert second == datetime(2025, 5, 1, 9, 5)
    assert second > first


def test_mark_as_read_unknown(db):
    with pytest.raises(NotFoundError, match="Notification with id 9 not found"):
        mark_notification_as_read(db, 9)


def test_send_email_is_idempotent(db, make_user, email_sender):
    user = make_user(email="cody@example.com")
    n = _notify(db, user, "Offer")

    assert send_email_notification(db, n.id, email_sender) is True
    assert send_email_notification(db, n.id, email_sender) is True

    db.refresh(n)
    assert n.email_sent is True
    assert email_sender.outbox == [
        {"to": "cody@example.com", "subject": "Offer", "body": "Your application moved forward"},
    ]


class UndeliverableSender:
    def __init__(self):
        self.attempts = 0

    def send(self, to_email, subject, body):
        self.attempts += 1
        return False


def test_failed_delivery_is_not_marked_sent(db, make_user, email_sender):
    n = _notify(db, make_user())
    down = UndeliverableSender()

    assert send_email_notification(db, n.id, down) is False
    db.refresh(n)
    assert n.email_sent is False

    # a later attempt through a working sender still delivers
    assert send_email_notification(db, n.id, email_sender) is True
    db.refresh(n)
    assert n.email_sent is True
    assert down.attempts == 1
    assert len(email_sender.outbox) == 1


def test_api_reports_failed_delivery(client, make_user):
    from talentai.main import app
    from talentai.notifications.email import get_email_sender

    user = make_user()
    n_id = client.post("/notifications", json={
        "user_id": user.id, "type": "application_status", "title": "t", "message": "m",
    }).json()["id"]
    app.dependency_overrides[get_email_sender] = UndeliverableSender

    resp = client.post(f"/notifications/{n_id}/send-email")
    assert resp.status_code == 200
    assert resp.json() == {"sent": False}
    assert client.get(f"/notifications/user/{user.id}").json()[0]["email_sent"] is False


def test_send_email_unknown(db, email_sender):
    with pytest.raises(NotFoundError):
        send_email_notification(db, 1, email_sender)
    assert email_sender.outbox == []


def test_logging_sender_logs_demo_message(caplog):
    sender = LoggingEmailSender(sender_email="hr@talentai.com")
    with caplog.at_level("INFO", logger="talentai.notifications.email"):
        assert sender.send("a@b.com", "Hello", "body") is True
    assert "[DEMO] email from hr@talentai.com to a@b.com: Hello" in caplog.text


def test_api_notification_flow(client, make_user, email_sender):
    user = make_user()
    created = client.post("/notifications", json={
        "user_id": user.id, "type": "weekly_report", "title": "Report ready", "message": "See dashboard",
    })
    assert created.status_code == 201
    n_id = created.json()["id"]

    assert client.get(f"/notifications/user/{user.id}", params={"unread_only": True}).json()[0]["id"] == n_id

    read = client.post(f"/notifications/{n_id}/read").json()
    assert read["read_at"] is not None
    assert client.get(f"/notifications/user/{user.id}", params={"unread_only": True}).json() == []

    assert client.post(f"/notifications/{n_id}/send-email").json() == {"sent": True}
    assert len(email_sender.outbox) == 1
    assert client.post("/notifications/404/send-email").status_code == 404
