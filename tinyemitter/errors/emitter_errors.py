"""Exception hierarchy for tinyemitter.

The emitter never lets a listener failure escape ``emit``. Failures are
wrapped in :class:`ListenerError` and handed to an optional hook instead;
:func:`log_listener_error` is a ready-made hook that logs them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Hashable

logger = logging.getLogger(__name__)


class EmitterError(Exception):
    """Base exception for all tinyemitter errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(EmitterError):
    """Raised when emitter options are invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class ListenerError(EmitterError):
    """Describes an exception raised by a listener during ``emit``.

    Instances are passed to the emitter's ``listener_error_hook``; the
    emitter itself never raises them.
    """

    def __init__(
        self,
        message: str,
        *,
        event: Hashable = None,
        listener: Callable[..., Any] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        details["event"] = repr(event)
        if listener is not None:
            details["listener"] = getattr(listener, "__qualname__", repr(listener))
        super().__init__(message, error_code="ListenerError", details=details, **kwargs)
        self.event = event
        self.listener = listener


def log_listener_error(error: ListenerError) -> None:
    """Hook that logs a swallowed listener failure with its traceback."""
    cause = error.cause
    exc_info = (type(cause), cause, cause.__traceback__) if cause is not None else None
    logger.error("Error: %s (context: %s)", error, error.details, exc_info=exc_info)
