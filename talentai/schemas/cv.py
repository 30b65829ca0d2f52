# talentai/schemas/cv.py
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from talentai.models.enums import FileType, ProcessingStatus

class CVUpload(BaseModel):
    candidate_id: int
    file_name: str
    file_type: FileType
    file_size: int = Field(ge=0)
    file_path: str

class CVFileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    candidate_id: int
    file_name: str
    file_type: FileType
    file_size: int
    file_path: str
    uploaded_at: datetime

class AIParsedDataOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    cv_file_id: int
    parsed_data: dict[str, Any]
    processing_status: ProcessingStatus
    created_at: datetime
    updated_at: datetime
