"""Error handling for tinyemitter."""

from tinyemitter.errors.emitter_errors import ConfigurationError
from tinyemitter.errors.emitter_errors import EmitterError
from tinyemitter.errors.emitter_errors import ListenerError
from tinyemitter.errors.emitter_errors import log_listener_error

__all__ = [
    "ConfigurationError",
    "EmitterError",
    "ListenerError",
    "log_listener_error",
]
