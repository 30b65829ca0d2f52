from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, DateTime, ForeignKey, JSON
from talentai.core.clock import utcnow
from talentai.db.base import Base
from talentai.models.enums import FileType, ProcessingStatus, enum_column

class CVFile(Base):
    __tablename__ = "cv_files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    candidate_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_type: Mapped[FileType] = mapped_column(enum_column(FileType, "file_type"), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    candidate = relationship("User")


class AIParsedData(Base):
    __tablename__ = "ai_parsed_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    cv_file_id: Mapped[int] = mapped_column(Integer, ForeignKey("cv_files.id"), index=True, unique=True, nullable=False)
    parsed_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    processing_status: Mapped[ProcessingStatus] = mapped_column(
        enum_column(ProcessingStatus, "processing_status"),
        default=ProcessingStatus.PENDING,
        index=True,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    cv_file = relationship("CVFile")
