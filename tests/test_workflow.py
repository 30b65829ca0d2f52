"""Tests for the status machines and their optional enforcement."""
import pytest

from talentai.core import workflow
from talentai.core.errors import ConflictError, InvalidTransitionError
from talentai.models.enums import ApplicationStatus as A
from talentai.models.enums import InterviewStatus as I
from talentai.models.enums import JobStatus as J
from talentai.schemas.interview import InterviewUpdate
from talentai.schemas.job import JobStatusUpdate
from talentai.services.interviews import update_interview
from talentai.services.jobs import update_job_status


@pytest.mark.parametrize("machine, enum_cls", [("Job", J), ("Application", A), ("Interview", I)])
def test_every_status_has_an_entry(machine, enum_cls):
    assert set(workflow.MACHINES[machine]) == set(enum_cls)


def test_job_machine_is_linear():
    assert workflow.is_allowed("Job", J.DRAFT, J.PENDING_APPROVAL)
    assert workflow.is_allowed("Job", J.APPROVED, J.PUBLISHED)
    assert not workflow.is_allowed("Job", J.DRAFT, J.PUBLISHED)
    assert not workflow.is_allowed("Job", J.CLOSED, J.PUBLISHED)


def test_application_machine():
    assert workflow.is_allowed("Application", A.OFFER_MADE, A.REJECTED)
    assert workflow.is_allowed("Application", A.OFFER_ACCEPTED, A.HIRED)
    assert not workflow.is_allowed("Application", A.PENDING, A.HIRED)
    assert not workflow.is_allowed("Application", A.HIRED, A.REJECTED)


def test_same_status_is_always_allowed():
    assert workflow.is_allowed("Job", J.CLOSED, J.CLOSED)
    assert workflow.is_allowed("Interview", I.COMPLETED, I.COMPLETED)


def test_check_transition_only_raises_when_enforced():
    workflow.check_transition("Job", J.DRAFT, J.CLOSED, enforce=False)
    with pytest.raises(InvalidTransitionError) as info:
        workflow.check_transition("Job", J.DRAFT, J.CLOSED, enforce=True)
    assert isinstance(info.value, ConflictError)
    assert info.value.status_code == 409
    assert info.value.message == "Job cannot move from 'draft' to 'closed'"


def test_permissive_by_default(db, make_user, make_job):
    job = make_job(make_user())
    job = update_job_status(db, job.id, JobStatusUpdate(status=J.CLOSED))
    assert job.status == J.CLOSED


def test_enforced_job_transition_leaves_row_untouched(db, make_user, make_job, monkeypatch):
    monkeypatch.setattr(workflow.settings, "ENFORCE_STATUS_TRANSITIONS", True)
    job = make_job(make_user())

    with pytest.raises(InvalidTransitionError):
        update_job_status(db, job.id, JobStatusUpdate(status=J.PUBLISHED))
    db.refresh(job)
    assert job.status == J.DRAFT
    assert job.published_at is None

    job = update_job_status(db, job.id, JobStatusUpdate(status=J.PENDING_APPROVAL))
    assert job.status == J.PENDING_APPROVAL


def test_enforced_interview_transition(db, pipeline, monkeypatch):
    from talentai.models.interview import Interview

    interview = Interview(
        application_id=pipeline["application"].id,
        interviewer_id=pipeline["interviewer"].id,
        scheduled_at=pipeline["job"].created_at,
        duration_minutes=30,
        status=I.COMPLETED,
    )
    db.add(interview)
    db.commit()

    monkeypatch.setattr(workflow.settings, "ENFORCE_STATUS_TRANSITIONS", True)
    with pytest.raises(InvalidTransitionError, match="Interview cannot move from 'completed' to 'scheduled'"):
        update_interview(db, interview.id, InterviewUpdate(status=I.SCHEDULED))


def test_api_maps_invalid_transition_to_409(client, make_user, make_job, monkeypatch):
    monkeypatch.setattr(workflow.settings, "ENFORCE_STATUS_TRANSITIONS", True)
    job = make_job(make_user())
    resp = client.patch(f"/jobs/{job.id}/status", json={"status": "closed"})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Job cannot move from 'draft' to 'closed'"}
