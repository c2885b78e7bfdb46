import logging
import threading
from typing import Optional

from fastapi import Request

from message_board.errors import ValidationError
from message_board.models import Message

logger = logging.getLogger(__name__)


class MessageStore:
    """
    Ordered, append-only collection of messages held in process memory.

    Each instance owns its own list, so independent stores never share
    state. The lock makes the read-length/append sequence atomic, which
    keeps ids unique when requests are handled on several threads.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._messages)

    def list_messages(self) -> list[Message]:
        """
        Return all stored messages in the order they were appended.

        Returns:
            A new list; mutating it does not touch the store.
        """
        with self._lock:
            messages = list(self._messages)
        logger.debug(f"Listed {len(messages)} messages")
        return messages

    def append(self, content: Optional[str]) -> Message:
        """
        Append a new message and return it.

        Args:
            content: Message text; stored verbatim

        Returns:
            The created Message with id set to the previous count plus one

        Raises:
            ValidationError: content is missing, not a string, or blank
        """
        if not isinstance(content, str) or not content.strip():
            logger.warning("Rejected message with empty content")
            raise ValidationError(
                "content must be a non-empty string",
                context={"field": "content"},
            )

        with self._lock:
            message = Message(id=str(len(self._messages) + 1), content=content)
            self._messages.append(message)

        logger.info(f"Message appended: id={message.id}")
        logger.debug(f"Message content length: {len(content)}")
        return message


def init_store() -> MessageStore:
    """
    Create the message store for an application instance.
    Called during application startup.
    """
    store = MessageStore()
    logger.info("Message store initialized")
    return store


def get_store(request: Request) -> MessageStore:
    """Dependency returning the store attached to the running app."""
    return request.app.state.store


def check_store_health(store: Optional[MessageStore]) -> bool:
    """
    Check that a store is attached and answering.

    Returns:
        True if the store can be read, False otherwise.
    """
    if store is None:
        logger.error("Message store not initialized")
        return False
    logger.debug(f"Message store healthy, {store.count()} messages held")
    return True
