"""Synchronous in-process event emitter.

Provides :class:`EventEmitter`, a registry of event keys to ordered listener
lists with the registration, removal and dispatch rules of the Node.js
``EventEmitter``:

- listeners fire in registration order; ``prepend_*`` variants insert at the
  front
- ``emit`` works on a snapshot, so listeners added or removed while an
  emission is running only affect later emissions
- an exception raised by one listener never stops the others and never
  reaches the caller of ``emit``
- emitting ``"error"`` first notifies listeners registered on
  :data:`~tinyemitter.constants.ERROR_MONITOR`
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import threading
from types import BuiltinMethodType
from types import MethodType
from types import MethodWrapperType
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable

from typing_extensions import Self

from tinyemitter.config import DEFAULT_OPTIONS
from tinyemitter.config import EmitterOptions
from tinyemitter.constants import ERROR_EVENT
from tinyemitter.constants import ERROR_MONITOR
from tinyemitter.constants import NEW_LISTENER_EVENT
from tinyemitter.constants import REMOVE_LISTENER_EVENT
from tinyemitter.constants import UNBOUNDED_LISTENERS
from tinyemitter.errors import ListenerError

if TYPE_CHECKING:
    from collections.abc import Hashable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]
ListenerErrorHook = Callable[[ListenerError], None]

_BOUND_METHOD_TYPES = (MethodType, BuiltinMethodType, MethodWrapperType)

# Distinguishes "no event given" from a None event key
_MISSING: Any = object()


class OnceWrapper:
    """Self-removing adapter created by ``once`` and ``prepend_once_listener``.

    Calling the wrapper calls the wrapped listener and then removes the
    wrapper from its emitter. The wrapped listener runs at most once, even
    when the wrapper is reached again through a nested emission.
    """

    __slots__ = ("_emitter", "_event", "_fired", "_listener")

    def __init__(self, emitter: EventEmitter, event: Hashable, listener: Listener) -> None:
        self._emitter = emitter
        self._event = event
        self._listener = listener
        self._fired = False

    @property
    def listener(self) -> Listener:
        """The listener passed to ``once``."""
        return self._listener

    original = listener

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._emitter._lock:
            if self._fired:
                return
            self._fired = True
        try:
            self._listener(*args, **kwargs)
        finally:
            self._emitter._remove_entry(self._event, self)

    def __repr__(self) -> str:
        return f"<OnceWrapper {self._listener!r}>"


def _unwrap(entry: Listener) -> Listener:
    if isinstance(entry, OnceWrapper):
        return entry.listener
    return entry


def _same_listener(entry: Listener, listener: Listener) -> bool:
    # Bound methods, builtin ones included, are recreated on every attribute
    # access; they compare equal when they share instance and function.
    if entry is listener:
        return True
    return isinstance(entry, _BOUND_METHOD_TYPES) and entry == listener


class EventEmitter:
    """Synchronous event emitter.

    Args:
        options: An :class:`EmitterOptions`, a mapping accepted by
            :meth:`EmitterOptions.from_mapping`, or ``None`` for defaults.
        listener_error_hook: Optional callable receiving a
            :class:`~tinyemitter.errors.ListenerError` for every exception
            swallowed during :meth:`emit`.

    Raises:
        ConfigurationError: If the options are invalid.
    """

    def __init__(
        self,
        options: EmitterOptions | Mapping[str, Any] | None = None,
        *,
        listener_error_hook: ListenerErrorHook | None = None,
    ) -> None:
        if options is None:
            options = DEFAULT_OPTIONS
        elif isinstance(options, Mapping):
            options = EmitterOptions.from_mapping(options)
        options.validate()

        self._options = options
        self._listener_error_hook = listener_error_hook
        self._handlers: dict[Hashable, list[Listener]] = {}
        self._lock = threading.RLock()

    @property
    def options(self) -> EmitterOptions:
        """The options this emitter was created with."""
        return self._options

    # Registration

    def on(self, event: Hashable, listener: Listener) -> Self:
        """Append ``listener`` to the listeners of ``event``.

        No check is made for duplicates; adding the same listener twice makes
        it fire twice per emission.
        """
        self._add_entry(event, listener, listener, prepend=False)
        return self

    def add_listener(self, event: Hashable, listener: Listener) -> Self:
        """Alias for :meth:`on`."""
        return self.on(event, listener)

    def prepend_listener(self, event: Hashable, listener: Listener) -> Self:
        """Insert ``listener`` before every listener currently on ``event``."""
        self._add_entry(event, listener, listener, prepend=True)
        return self

    def once(self, event: Hashable, listener: Listener) -> Self:
        """Append a listener that is removed after its first call."""
        self._add_entry(event, OnceWrapper(self, event, listener), listener, prepend=False)
        return self

    def prepend_once_listener(self, event: Hashable, listener: Listener) -> Self:
        """Like :meth:`once` but inserts at the front."""
        self._add_entry(event, OnceWrapper(self, event, listener), listener, prepend=True)
        return self

    # Removal

    def off(self, event: Hashable, listener: Listener) -> Self:
        """Alias for :meth:`remove_listener`."""
        return self.remove_listener(event, listener)

    def remove_listener(self, event: Hashable, listener: Listener) -> Self:
        """Remove at most one registration of ``listener`` from ``event``.

        Listeners added with :meth:`once` are removed by passing the original
        listener. Removing a listener that is not registered does nothing.
        Emissions already in progress are not affected.
        """
        self._remove_entry(event, listener, by_original=True)
        return self

    def remove_all_listeners(self, event: Hashable = _MISSING) -> Self:
        """Remove every listener of ``event``, or of all events if omitted."""
        if event is _MISSING:
            for name in self.event_names():
                self.remove_all_listeners(name)
        else:
            for entry in self.raw_listeners(event):
                self._remove_entry(event, entry)
        return self

    # Dispatch

    def emit(self, event: Hashable, *args: Any, **kwargs: Any) -> bool:
        """Call every listener of ``event`` in order with the given arguments.

        Returns:
            ``True`` if the event had listeners, ``False`` otherwise.
        """
        with self._lock:
            snapshot = list(self._handlers.get(event, ()))
            if event == ERROR_EVENT:
                snapshot[:0] = self._handlers.get(ERROR_MONITOR, ())

        for listener in snapshot:
            try:
                listener(*args, **kwargs)
            except Exception as exc:
                self._report_listener_error(event, listener, exc)

        return bool(snapshot)

    # Introspection

    def event_names(self) -> list[Hashable]:
        """Return the events that have listeners, in registration order."""
        with self._lock:
            return list(self._handlers)

    def listener_count(self, event: Hashable, listener: Listener | None = None) -> int:
        """Return the number of listeners for ``event``.

        If ``listener`` is given, count only its registrations. Listeners
        added with :meth:`once` are matched by their original listener.
        """
        with self._lock:
            entries = self._handlers.get(event, ())
            if listener is None:
                return len(entries)
            return sum(1 for entry in entries if entry is listener or _same_listener(_unwrap(entry), listener))

    def listeners(self, event: Hashable) -> list[Listener]:
        """Return a copy of the listeners for ``event``."""
        return self.raw_listeners(event)

    def raw_listeners(self, event: Hashable) -> list[Listener]:
        """Return a copy of the listeners for ``event``, including once wrappers."""
        with self._lock:
            return list(self._handlers.get(event, ()))

    def get_max_listeners(self) -> float:
        """Noop, kept for compatibility. Always unbounded."""
        return UNBOUNDED_LISTENERS

    def set_max_listeners(self, n: Any) -> Self:  # noqa: ARG002
        """Noop, kept for compatibility."""
        return self

    # Internals

    def _add_entry(self, event: Hashable, entry: Listener, listener: Listener, *, prepend: bool) -> None:
        with self._lock:
            entries = self._handlers.setdefault(event, [])
            if prepend:
                entries.insert(0, entry)
            else:
                entries.append(entry)
        logger.debug("Added listener %r for event %r", listener, event)

        if self._options.emit_event_emitter_events:
            self.emit(NEW_LISTENER_EVENT, event, listener)

    def _remove_entry(self, event: Hashable, target: Listener, *, by_original: bool = False) -> None:
        with self._lock:
            entries = self._handlers.get(event)
            if not entries:
                return
            for index, entry in enumerate(entries):
                if entry is target or (by_original and _same_listener(_unwrap(entry), target)):
                    break
            else:
                return

            del entries[index]
            if not entries:
                del self._handlers[event]
        logger.debug("Removed listener %r for event %r", entry, event)

        if self._options.emit_event_emitter_events:
            self.emit(REMOVE_LISTENER_EVENT, event, _unwrap(entry))

    def _report_listener_error(self, event: Hashable, listener: Listener, exc: Exception) -> None:
        hook = self._listener_error_hook
        if hook is None:
            return
        error = ListenerError(
            f"Listener for event {event!r} raised {type(exc).__name__}",
            event=event,
            listener=_unwrap(listener),
            cause=exc,
        )
        try:
            hook(error)
        except Exception:
            logger.exception("Listener error hook failed for event %r", event)
