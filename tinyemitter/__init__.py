"""tinyemitter - a small synchronous event emitter modelled on Node.js."""

from tinyemitter.config import EmitterOptions
from tinyemitter.constants import ERROR_EVENT
from tinyemitter.constants import ERROR_MONITOR
from tinyemitter.constants import NEW_LISTENER_EVENT
from tinyemitter.constants import REMOVE_LISTENER_EVENT
from tinyemitter.emitter import EventEmitter
from tinyemitter.emitter import OnceWrapper
from tinyemitter.errors import ConfigurationError
from tinyemitter.errors import EmitterError
from tinyemitter.errors import ListenerError
from tinyemitter.errors import log_listener_error

__all__ = [
    "ERROR_EVENT",
    "ERROR_MONITOR",
    "NEW_LISTENER_EVENT",
    "REMOVE_LISTENER_EVENT",
    "ConfigurationError",
    "EmitterError",
    "EmitterOptions",
    "EventEmitter",
    "ListenerError",
    "OnceWrapper",
    "__version__",
    "log_listener_error",
]
__version__ = "0.1.0"
