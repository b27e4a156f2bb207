"""
In-process query dispatch for the application layer.

A query is a frozen dataclass deriving from Request[TResponse]. The Mediator
hands it to the handler registered for its exact type, after threading it
through the pipeline behaviors (logging, validation) in registration order.
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Generic, List, TypeVar

TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')

NextStep = Callable[[], Awaitable[Any]]


class Request(Generic[TResponse], ABC):
    """Marker base for queries; the type parameter names the response"""


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """Answers one request type"""

    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        ...


class PipelineBehavior(ABC):
    """
    Middleware around handler execution.

    Implementations must await next_handler() exactly once to continue the
    pipeline, or raise to stop it.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler: NextStep):
        ...


class Mediator:
    """Dispatches requests to handler factories through the behavior chain"""

    def __init__(self):
        self._handlers: Dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: List[PipelineBehavior] = []

    def register_handler(self, request_type: type, handler_factory: Callable[[], RequestHandler]):
        """
        Bind a request type to a factory; a fresh handler is built per request.

        Args:
            request_type: Exact request class (subclasses are not matched)
            handler_factory: Zero-argument callable returning the handler
        """
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior):
        """Append a behavior; the first one registered runs outermost"""
        self._behaviors.append(behavior)

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """
        Run request through every behavior, then its handler.

        Raises:
            ValueError: If no handler is registered for the request type
        """
        factory = self._handlers.get(type(request))
        if factory is None:
            raise ValueError(f"No handler registered for {type(request).__name__}")

        return await self._step(request, factory, 0)

    async def _step(self, request: Any, factory: Callable[[], RequestHandler], index: int):
        if index == len(self._behaviors):
            return await factory().handle(request)

        async def next_handler():
            return await self._step(request, factory, index + 1)

        return await self._behaviors[index].handle(request, next_handler)
