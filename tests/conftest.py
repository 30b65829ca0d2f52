"""
Pytest configuration: every test gets a fresh in-memory SQLite database.
"""
import os

# Settings are read at import time - point them at throwaway resources first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["AI_PROCESSING_DELAY_MS"] = "0"
os.environ["ENFORCE_STATUS_TRANSITIONS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import talentai.models  # noqa: F401
from talentai.cv.parsers import MockCVParser, get_cv_parser
from talentai.db.base import Base
from talentai.db.session import build_engine, get_db
from talentai.models.application import Application
from talentai.models.cv import CVFile
from talentai.models.enums import ApplicationStatus, FileType, JobStatus, UserRole
from talentai.models.job import Job
from talentai.models.user import User
from talentai.notifications.email import get_email_sender


class RecordingEmailSender:
    def __init__(self):
        self.outbox = []

    def send(self, to_email, subject, body):
        self.outbox.append({"to": to_email, "subject": subject, "body": body})
        return True


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    with session_factory() as s:
        yield s


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def client(session_factory, email_sender):
    from talentai.main import app

    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_cv_parser] = lambda: MockCVParser(delay_ms=0)
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------
# Row factories (direct inserts, so timestamps can be pinned)
# ---------------------------

@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role=UserRole.CANDIDATE, first_name="Test", last_name=None, **kw):
        counter["n"] += 1
        user = User(
            email=kw.pop("email", f"user{counter['n']}@test.com"),
            first_name=first_name,
            last_name=last_name or role.value.title(),
            role=role,
            **kw,
        )
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def make_job(db):
    def _make(created_by, title="Software Engineer", status=JobStatus.DRAFT, **kw):
        job = Job(
            title=title,
            description="Build things",
            requirements="Python",
            department=kw.pop("department", "Engineering"),
            employment_type="full-time",
            created_by=created_by.id,
            status=status,
            **kw,
        )
        db.add(job)
        db.commit()
        return job

    return _make


@pytest.fixture
def make_cv(db):
    def _make(candidate, file_name="resume.pdf", **kw):
        cv = CVFile(
            candidate_id=candidate.id,
            file_name=file_name,
            file_type=kw.pop("file_type", FileType.PDF),
            file_size=kw.pop("file_size", 1024),
            file_path=kw.pop("file_path", f"/cvs/{file_name}"),
            **kw,
        )
        db.add(cv)
        db.commit()
        return cv

    return _make


@pytest.fixture
def make_application(db, make_cv):
    def _make(job, candidate, status=ApplicationStatus.PENDING, cv=None, **kw):
        cv = cv or make_cv(candidate)
        application = Application(
            job_id=job.id,
            candidate_id=candidate.id,
            cv_file_id=cv.id,
            status=status,
            **kw,
        )
        db.add(application)
        db.commit()
        return application

    return _make


@pytest.fixture
def pipeline(make_user, make_job, make_application):
    """A requester with one published job and one pending application from a candidate."""
    requester = make_user(UserRole.REQUESTER, first_name="Rita")
    candidate = make_user(UserRole.CANDIDATE, first_name="Cody")
    interviewer = make_user(UserRole.REQUESTER, first_name="Ivan", last_name="Interviewer")
    job = make_job(requester, status=JobStatus.PUBLISHED)
    application = make_application(job, candidate)
    return {
        "requester": requester,
        "candidate": candidate,
        "interviewer": interviewer,
        "job": job,
        "application": application,
    }
