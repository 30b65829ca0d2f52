"""App wiring: health, docs redirect, error mapping, seeding and logging."""
import logging

from sqlalchemy import select

from talentai.core.config import Settings
from talentai.core.errors import NotFoundError, RuleViolationError
from talentai.core import logging as talentai_logging
from talentai.core.logging import LOG_FORMAT, configure_logging
from talentai.db.seed import SEED_USERS, seed_demo_users
from talentai.models.enums import UserRole
from talentai.models.user import User


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert "timestamp" in resp.json()


def test_root_redirects_to_docs(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code in (302, 307)
    assert resp.headers["location"] == "/docs"


def test_domain_errors_carry_status_codes():
    assert NotFoundError("Job", 3).status_code == 404
    assert NotFoundError("Job", 3).message == "Job with id 3 not found"
    assert RuleViolationError("nope").status_code == 400


def test_not_found_maps_to_detail_body(client):
    resp = client.post("/notifications/77/read")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Notification with id 77 not found"}


def test_error_handler_logs_warning(client, caplog):
    with caplog.at_level(logging.WARNING, logger="talentai.main"):
        client.patch("/interviews/5", json={"notes": "x"})
    assert "PATCH /interviews/5 -> 404: Interview with id 5 not found" in caplog.text


def test_seed_demo_users_runs_once(db):
    assert seed_demo_users(db) == len(SEED_USERS)
    assert seed_demo_users(db) == 0

    users = db.execute(select(User)).scalars().all()
    assert len(users) == 6
    admins = [u for u in users if u.role == UserRole.ADMIN]
    assert [a.email for a in admins] == ["admin@talentai.com"]
    assert {u.full_name for u in users if u.role == UserRole.CANDIDATE} == {"Alex Rodriguez", "Emily Chen"}


def test_seed_skips_populated_database(db, make_user):
    make_user()
    assert seed_demo_users(db) == 0


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("AI_PROCESSING_DELAY_MS", "250")
    monkeypatch.setenv("ENFORCE_STATUS_TRANSITIONS", "true")
    monkeypatch.setenv("CV_PARSER", "extract")
    s = Settings(_env_file=None)
    assert s.AI_PROCESSING_DELAY_MS == 250
    assert s.ENFORCE_STATUS_TRANSITIONS is True
    assert s.CV_PARSER == "extract"


def test_settings_defaults(monkeypatch):
    for name in ("DATABASE_URL", "AI_PROCESSING_DELAY_MS", "ENFORCE_STATUS_TRANSITIONS",
                 "CREATE_TABLES_ON_STARTUP", "SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.DATABASE_URL == "sqlite:///./talentai.db"
    assert s.AI_PROCESSING_DELAY_MS == 100
    assert s.ENFORCE_STATUS_TRANSITIONS is False
    assert s.CV_PARSER == "mock"


def test_configure_logging_writes_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(talentai_logging, "_configured", False)
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "logs" / "talentai.log"

    saved = root.handlers[:]
    root.handlers.clear()
    try:
        configure_logging(level="debug", log_file=str(log_file))
        logging.getLogger("talentai.test").debug("hello file")
        added = root.handlers[:]
        for h in added:
            h.flush()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved

    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in added)
    assert "talentai.test - DEBUG - hello file" in log_file.read_text(encoding="utf-8")
    assert LOG_FORMAT.startswith("[%(asctime)s]")


def test_configure_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(talentai_logging, "_configured", True)
    monkeypatch.setattr(root, "level", root.level)
    before = list(root.handlers)

    configure_logging(level="WARNING")

    assert root.handlers == before
    assert root.level == logging.WARNING
