import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    CANDIDATE = "candidate"
    REQUESTER = "requester"
    ADMIN = "admin"


class JobStatus(str, enum.Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    PUBLISHED = "published"
    CLOSED = "closed"


class FileType(str, enum.Enum):
    PDF = "pdf"
    DOCX = "docx"
    JPG = "jpg"
    PNG = "png"


class ProcessingStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    AI_PROCESSING = "ai_processing"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    INTERVIEWED = "interviewed"
    OFFER_MADE = "offer_made"
    OFFER_ACCEPTED = "offer_accepted"
    OFFER_REJECTED = "offer_rejected"
    HIRED = "hired"


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class NotificationType(str, enum.Enum):
    APPLICATION_STATUS = "application_status"
    INTERVIEW_INVITATION = "interview_invitation"
    JOB_APPROVAL = "job_approval"
    WEEKLY_REPORT = "weekly_report"


def enum_column(enum_cls: type[enum.Enum], name: str) -> Enum:
    """Store the enum's value (not its member name) as a VARCHAR + CHECK."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        values_callable=lambda e: [m.value for m in e],
        length=32,
    )
