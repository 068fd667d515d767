"""Denormalized child counters kept in step with child writes."""

from typing import Any, Dict, Type

from sqlalchemy import update
from sqlalchemy.orm import InstrumentedAttribute, Session

from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.repositories.interactions.models.chats_model import Chats

COUNTER_COLUMNS: Dict[Type[Any], InstrumentedAttribute] = {
    Applications: Applications.chats_count,
    Chats: Chats.messages_count,
}


class CounterCache:
    """
    Maintain ``chats_count`` and ``messages_count`` on the parent row.

    Both operations issue a single ``UPDATE ... SET count = count +/- 1`` inside the
    caller's transaction, so the counter commits or rolls back with the child row.
    The update also takes the parent's row lock, which serializes concurrent
    writers of the same parent until their transaction ends.
    """

    def increment(self, db: Session, parent: Any) -> None:
        """Add one to the parent's child counter."""
        self._apply(db, parent, 1)

    def decrement(self, db: Session, parent: Any) -> None:
        """Remove one from the parent's child counter, never going below zero."""
        self._apply(db, parent, -1)

    def _apply(self, db: Session, parent: Any, delta: int) -> None:
        model = type(parent)
        column = COUNTER_COLUMNS[model]
        statement = update(model).where(model.id == parent.id)
        if delta < 0:
            statement = statement.where(column > 0)
        db.execute(
            statement.values({column: column + delta}).execution_options(
                synchronize_session=False
            )
        )
        db.expire(parent, [column.key])
