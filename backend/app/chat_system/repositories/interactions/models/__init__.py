"""ORM models registered on the declarative base."""

from chat_system.repositories.interactions.models.applications_model import (  # noqa: F401
    Applications,
)
from chat_system.repositories.interactions.models.chats_model import Chats  # noqa: F401
from chat_system.repositories.interactions.models.messages_model import (  # noqa: F401
    Messages,
)
