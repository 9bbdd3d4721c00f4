"""
Reserved event keys used by the emitter.

``ERROR_MONITOR`` is a unique token rather than a string so it can never
collide with a key chosen by user code.
"""
import math
from typing import Final


class _ReservedKey:
    """Opaque, identity-compared event key."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<reserved event key {self._name}>"

    def __reduce__(self) -> str:
        # Pickling and copying resolve back to the module-level singleton
        return self._name


# Event keys with special meaning
ERROR_EVENT: Final[str] = "error"
NEW_LISTENER_EVENT: Final[str] = "newListener"
REMOVE_LISTENER_EVENT: Final[str] = "removeListener"

# Listeners on this key observe every ERROR_EVENT emission first
ERROR_MONITOR: Final[_ReservedKey] = _ReservedKey("ERROR_MONITOR")

# Reported by get_max_listeners(); no limit is ever enforced
UNBOUNDED_LISTENERS: Final[float] = math.inf
