# talentai/core/workflow.py
"""Status machines for jobs, applications and interviews.

Each machine maps a target status to the set of statuses it may be entered
from. The graphs are only consulted when ``ENFORCE_STATUS_TRANSITIONS`` is on;
otherwise any status may follow any status.
"""
from talentai.core.config import settings
from talentai.core.errors import InvalidTransitionError
from talentai.models.enums import ApplicationStatus as A
from talentai.models.enums import InterviewStatus as I
from talentai.models.enums import JobStatus as J

JOB_PREDECESSORS: dict[J, set[J]] = {
    J.DRAFT: set(),
    J.PENDING_APPROVAL: {J.DRAFT},
    J.APPROVED: {J.PENDING_APPROVAL},
    J.PUBLISHED: {J.APPROVED},
    J.CLOSED: {J.PUBLISHED},
}

_OPEN_APPLICATION = {
    A.PENDING, A.AI_PROCESSING, A.SHORTLISTED,
    A.INTERVIEW_SCHEDULED, A.INTERVIEWED, A.OFFER_MADE,
}

APPLICATION_PREDECESSORS: dict[A, set[A]] = {
    A.PENDING: set(),
    A.AI_PROCESSING: {A.PENDING},
    A.SHORTLISTED: {A.PENDING, A.AI_PROCESSING},
    A.REJECTED: _OPEN_APPLICATION,
    A.INTERVIEW_SCHEDULED: {A.SHORTLISTED, A.INTERVIEWED},
    A.INTERVIEWED: {A.INTERVIEW_SCHEDULED},
    A.OFFER_MADE: {A.SHORTLISTED, A.INTERVIEWED},
    A.OFFER_ACCEPTED: {A.OFFER_MADE},
    A.OFFER_REJECTED: {A.OFFER_MADE},
    A.HIRED: {A.OFFER_ACCEPTED},
}

INTERVIEW_PREDECESSORS: dict[I, set[I]] = {
    I.SCHEDULED: {I.RESCHEDULED},
    I.RESCHEDULED: {I.SCHEDULED},
    I.COMPLETED: {I.SCHEDULED, I.RESCHEDULED},
    I.CANCELLED: {I.SCHEDULED, I.RESCHEDULED},
}

MACHINES = {
    "Job": JOB_PREDECESSORS,
    "Application": APPLICATION_PREDECESSORS,
    "Interview": INTERVIEW_PREDECESSORS,
}


def is_allowed(machine: str, current, target) -> bool:
    if current == target:
        return True
    return current in MACHINES[machine].get(target, set())


def check_transition(machine: str, current, target, enforce: bool | None = None) -> None:
    """Raise InvalidTransitionError when enforcement is on and the move is not in the graph."""
    if enforce is None:
        enforce = settings.ENFORCE_STATUS_TRANSITIONS
    if enforce and not is_allowed(machine, current, target):
        raise InvalidTransitionError(machine, _value(current), _value(target))


def _value(status) -> str:
    return getattr(status, "value", str(status))
