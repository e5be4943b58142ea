"""
Command/query dispatching.

Commands and queries are plain objects; each message class is routed to
exactly one async handler. The back office builds one bus per request with
handlers bound to the request's database session (see backoffice.dependencies).
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Type

from backoffice.core.exceptions import HandlerNotFoundError

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


class CommandBus:
    def __init__(self):
        self._handlers: Dict[Type, Handler] = {}

    def register(self, message_type: Type, handler: Handler) -> None:
        self._handlers[message_type] = handler

    async def handle(self, message: Any) -> Any:
        """Dispatch a message to its handler and return the handler's result."""
        handler = self._handlers.get(type(message))
        if handler is None:
            raise HandlerNotFoundError(type(message))

        logger.debug("Dispatching %s", type(message).__name__)
        return await handler(message)
