from typing import TypeVar

from sqlalchemy.orm import Session

from talentai.core.errors import NotFoundError

T = TypeVar("T")


def get_or_raise(db: Session, model: type[T], entity_id: int, entity: str | None = None) -> T:
    """Primary-key lookup that raises NotFoundError naming the entity and id."""
    row = db.get(model, entity_id)
    if row is None:
        raise NotFoundError(entity or model.__name__, entity_id)
    return row
