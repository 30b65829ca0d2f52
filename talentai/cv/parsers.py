# talentai/cv/parsers.py
"""CV parsing capability.

Handlers depend on the ``CVParser`` protocol only; the concrete parser is
picked from settings (or overridden in tests) through ``get_cv_parser``.
"""
import logging
import time
from pathlib import Path
from typing import Protocol

from talentai.core.clock import utcnow
from talentai.core.config import settings
from talentai.cv.extractors import (
    extract_contacts,
    extract_resume_entities,
    sniff_and_extract_text,
)
from talentai.models.cv import CVFile

logger = logging.getLogger(__name__)


class CVParser(Protocol):
    def parse(self, cv_file: CVFile) -> dict: ...


def _file_info(cv_file: CVFile) -> dict:
    return {
        "file_name": cv_file.file_name,
        "file_type": cv_file.file_type.value,
        "processed_at": utcnow().isoformat(),
    }


class MockCVParser:
    """Stands in for an external AI service: waits, then returns a canned profile."""

    def __init__(self, delay_ms: int | None = None):
        self.delay_ms = settings.AI_PROCESSING_DELAY_MS if delay_ms is None else delay_ms

    def parse(self, cv_file: CVFile) -> dict:
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)
        return {
            "personal_info": {
                "name": "John Doe",
                "email": "john.doe@email.com",
                "phone": "+1234567890",
                "location": "New York, NY",
            },
            "experience": [
                {
                    "company": "Tech Corp",
                    "position": "Software Engineer",
                    "duration": "2020-2023",
                    "skills_used": ["JavaScript", "React", "Node.js"],
                }
            ],
            "education": [
                {
                    "degree": "Bachelor of Computer Science",
                    "institution": "State University",
                    "year": "2020",
                }
            ],
            "skills": ["JavaScript", "Python", "React", "Node.js", "SQL"],
            "certifications": ["AWS Certified Developer"],
            "summary": "Experienced software engineer with 3+ years in web development",
            "file_info": _file_info(cv_file),
        }


class TextExtractionCVParser:
    """Reads the stored CV and pulls out skills, education and contacts with regexes."""

    SUMMARY_CHARS = 300

    def __init__(self, storage_dir: str | None = None):
        self.storage_dir = Path(storage_dir or settings.CV_STORAGE_DIR)

    def _resolve(self, file_path: str) -> Path:
        """Locate the stored file; paths that escape storage_dir are refused."""
        root = self.storage_dir.resolve()
        path = (root / file_path).resolve()
        if not path.is_relative_to(root):
            raise ValueError(f"CV path {file_path!r} is outside the CV storage directory")
        return path

    def parse(self, cv_file: CVFile) -> dict:
        path = self._resolve(cv_file.file_path)
        text = sniff_and_extract_text(path.name, path.read_bytes()).strip()
        logger.info("extracted %d chars from %s", len(text), path)

        entities = extract_resume_entities(text)
        return {
            "personal_info": extract_contacts(text),
            "experience": [],
            "education": entities["education"],
            "organizations": entities["organizations"],
            "experience_years": entities["experience_years"],
            "skills": entities["skills"],
            "certifications": [],
            "summary": " ".join(text.split())[: self.SUMMARY_CHARS],
            "file_info": _file_info(cv_file),
        }


_PARSERS = {
    "mock": MockCVParser,
    "extract": TextExtractionCVParser,
}


def build_cv_parser(kind: str | None = None) -> CVParser:
    kind = (kind or settings.CV_PARSER).lower()
    if kind not in _PARSERS:
        raise ValueError(f"Unknown CV_PARSER '{kind}', expected one of {sorted(_PARSERS)}")
    return _PARSERS[kind]()


def get_cv_parser() -> CVParser:
    """FastAPI dependency."""
    return build_cv_parser()
