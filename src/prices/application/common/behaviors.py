"""
Pipeline behaviors (middleware) for the mediator.

Behaviors wrap handler execution; each one can pre-process the request,
call the next step and observe the outcome.
"""
import logging
from typing import Any

from ...mediator import PipelineBehavior
from ...domain.shared.exceptions import DomainException

logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Logs query failures.

    Domain outcomes (price not applicable, invalid query) are logged at
    WARNING without a traceback; anything else is logged at ERROR with one.
    Every exception is re-raised unchanged.
    """

    async def handle(self, request: Any, next_handler):
        request_name = type(request).__name__

        try:
            return await next_handler()
        except DomainException as e:
            logger.warning(f"{request_name} not fulfilled: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed executing {request_name}: {e}", exc_info=True)
            raise


class ValidationBehavior(PipelineBehavior):
    """
    Validates requests before handler execution.

    If the request has a validate() method, calls it.
    """

    async def handle(self, request: Any, next_handler):
        if hasattr(request, 'validate') and callable(getattr(request, 'validate')):
            request.validate()

        return await next_handler()
