"""Email delivery for notifications - demo sender only logs the message."""
import logging
from typing import Protocol

from talentai.core.config import settings

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    def send(self, to_email: str, subject: str, body: str) -> bool: ...


class LoggingEmailSender:
    """Records the outgoing message in the log instead of talking to a mail server."""

    def __init__(self, sender_email: str | None = None):
        self.sender_email = sender_email or settings.EMAIL_SENDER_ADDRESS

    def send(self, to_email: str, subject: str, body: str) -> bool:
        logger.info("[DEMO] email from %s to %s: %s", self.sender_email, to_email, subject)
        return True


_default_sender = LoggingEmailSender()


def get_email_sender() -> EmailSender:
    """FastAPI dependency."""
    return _default_sender
