"""Per-parent sequence numbers for chats and messages."""

from typing import Any, Callable, Dict, Tuple, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, Session

from chat_system.errors import ConstraintViolation
from chat_system.logger_config import get_logger
from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.repositories.interactions.models.chats_model import Chats
from chat_system.repositories.interactions.models.messages_model import Messages
from chat_system.services.interactions.counter_cache import CounterCache

logger = get_logger(__name__)

T = TypeVar("T")

# parent model -> (child number column, child foreign key column)
CHILD_SEQUENCES: Dict[Type[Any], Tuple[InstrumentedAttribute, InstrumentedAttribute]] = {
    Applications: (Chats.number, Chats.application_id),
    Chats: (Messages.number, Messages.chat_id),
}


class SequenceAllocator:
    """
    Assign the next number for a new child inside its parent.

    The number is ``max(existing numbers) + 1``, or 1 for the first child. The
    caller must already hold the parent's row lock (see ``CounterCache``) and
    insert the child in the same transaction; the unique constraint on
    ``(parent, number)`` backs the allocation up if that contract is broken.
    """

    def current_max(self, db: Session, parent: Any) -> int:
        """Return the highest number assigned among the parent's children, 0 if none."""
        number_column, parent_column = CHILD_SEQUENCES[type(parent)]
        highest = (
            db.query(func.max(number_column)).filter(parent_column == parent.id).scalar()
        )
        return int(highest or 0)

    def allocate_next(self, db: Session, parent: Any) -> int:
        """Return the number the next child of ``parent`` must be stored with."""
        return self.current_max(db, parent) + 1


class NumberedChildWriter:
    """
    Create a numbered child in one unit of work with its parent's counter update.

    Each attempt loads the parent, bumps its counter (taking the parent row lock),
    allocates ``max + 1`` and inserts the child, then commits. When the insert
    still collides on the ``(parent, number)`` unique constraint the transaction
    is rolled back and retried with a fresh maximum, up to ``max_attempts`` times.
    """

    def __init__(
        self,
        allocator: SequenceAllocator,
        counter_cache: CounterCache,
        max_attempts: int = 3,
    ) -> None:
        self.allocator = allocator
        self.counter_cache = counter_cache
        self.max_attempts = max(max_attempts, 1)

    def create(
        self,
        db: Session,
        load_parent: Callable[[], Any],
        insert_child: Callable[[Any, int], T],
    ) -> T:
        """
        Run the numbered insert and return the committed child.

        Args:
            db (Session): The database session owning the transaction.
            load_parent (Callable[[], Any]): Returns the parent row or raises ``NotFound``.
            insert_child (Callable[[Any, int], T]): Adds the child for ``(parent, number)``.

        Raises:
            NotFound: the parent does not exist.
            ConstraintViolation: every attempt collided on the child number.
        """
        for attempt in range(1, self.max_attempts + 1):
            parent = load_parent()
            try:
                self.counter_cache.increment(db, parent)
                number = self.allocator.allocate_next(db, parent)
                child = insert_child(parent, number)
                db.commit()
                return child
            except IntegrityError as e:
                db.rollback()
                logger.warning(
                    f"Sequence number collision under {type(parent).__name__} "
                    f"{parent.id} (attempt {attempt}/{self.max_attempts}): {e.orig}"
                )
            except Exception:
                db.rollback()
                raise

        raise ConstraintViolation(
            f"Could not allocate a unique number after {self.max_attempts} attempts"
        )
