from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Text, DateTime, ForeignKey
from talentai.core.clock import utcnow
from talentai.db.base import Base
from talentai.models.enums import ApplicationStatus, enum_column

class Application(Base):
    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    job_id: Mapped[int] = mapped_column(Integer, ForeignKey("jobs.id"), index=True, nullable=False)
    candidate_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    cv_file_id: Mapped[int] = mapped_column(Integer, ForeignKey("cv_files.id"), nullable=False)
    ai_parsed_data_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("ai_parsed_data.id"))
    status: Mapped[ApplicationStatus] = mapped_column(
        enum_column(ApplicationStatus, "application_status"),
        default=ApplicationStatus.PENDING,
        index=True,
        nullable=False,
    )
    ai_match_score: Mapped[int | None] = mapped_column(Integer)  # percentage 0-100
    cover_letter: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    job = relationship("Job")
    candidate = relationship("User")
    cv_file = relationship("CVFile")
