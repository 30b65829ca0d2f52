"""Domain errors raised by the service layer.

Each error carries the HTTP status the API layer answers with, so routes never
translate exceptions themselves.
"""


class RecruitmentError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RecruitmentError):
    status_code = 404

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(RecruitmentError):
    status_code = 409


class RuleViolationError(RecruitmentError):
    status_code = 400


class InvalidTransitionError(ConflictError):
    def __init__(self, machine: str, current: str, target: str):
        super().__init__(f"{machine} cannot move from '{current}' to '{target}'")
        self.machine = machine
        self.current = current
        self.target = target


class CVProcessingError(RecruitmentError):
    status_code = 502
