"""Construction-time options for :class:`~tinyemitter.emitter.EventEmitter`.

Options are fixed when an emitter is created. They can be given as an
:class:`EmitterOptions` instance or as a mapping using either the Node.js
option names (``captureRejections``) or their snake_case equivalents.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
import logging
from typing import TYPE_CHECKING
from typing import Any

from tinyemitter.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_OPTION_ALIASES = {
    "captureRejections": "capture_rejections",
    "emitEventEmitterEvents": "emit_event_emitter_events",
}


@dataclass(frozen=True)
class EmitterOptions:
    """Immutable emitter configuration.

    ``capture_rejections`` is accepted for API compatibility only and has no
    effect. ``emit_event_emitter_events`` controls whether registration and
    removal raise the ``newListener`` / ``removeListener`` meta-events.
    """

    capture_rejections: bool = False
    emit_event_emitter_events: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> EmitterOptions:
        """Create options from a mapping of option names to values."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        unknown: list[str] = []

        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value
            else:
                unknown.append(str(key))

        if unknown:
            logger.warning("Ignoring unknown emitter option(s): %s", ", ".join(sorted(unknown)))

        return cls(**values)

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` unless every flag is a bool."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Option {f.name!r} must be a bool",
                    config_key=f.name,
                    details={"value": repr(value)},
                )


# Default options instance
DEFAULT_OPTIONS = EmitterOptions()
