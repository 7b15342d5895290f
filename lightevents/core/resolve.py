"""
LightEvents Resolve - Name-based handler lookup

Observers declare which of their methods may be subscribed by name:

    class Door:
        @event_handler
        def on_switch(self, event: BooleanEvent) -> None:
            self.open = event.value

    bus.subscribe_by_name(BooleanEvent, door, "on_switch")

Only methods marked with @event_handler are visible. Lookup failure is a
normal None result.
"""
import inspect
import logging
import typing
import weakref
from typing import Any, Callable, Dict, Optional

from lightevents.core.events import Event

logger = logging.getLogger(__name__)

_MARKER = "__event_handler_name__"

# Capability tables, built lazily per observer class
_tables: "weakref.WeakKeyDictionary[type, Dict[str, str]]" = weakref.WeakKeyDictionary()


def event_handler(func: Optional[Callable] = None, *, name: Optional[str] = None):
    """Mark a method as resolvable by name (defaults to the method name)."""
    def mark(f: Callable) -> Callable:
        setattr(f, _MARKER, name or f.__name__)
        return f

    if func is not None:
        return mark(func)
    return mark


def handler_table(cls: type) -> Dict[str, str]:
    """Map handler names to attribute names for cls; subclasses win."""
    table = _tables.get(cls)
    if table is None:
        table = {}
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                handler_name = getattr(attr, _MARKER, None)
                if handler_name is not None and inspect.isfunction(attr):
                    table[handler_name] = attr_name
        _tables[cls] = table
    return table


def _accepts(func: Callable, event_type: Optional[type]) -> bool:
    """One positional event parameter, no return value."""
    params = list(inspect.signature(func).parameters.values())[1:]  # drop self
    if len(params) != 1:
        return False
    param = params[0]
    if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
        return False

    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        return False

    returns = hints.get("return", type(None))
    if returns is not type(None):
        return False

    annotation = hints.get(param.name)
    if annotation is None:
        return True
    if not inspect.isclass(annotation) or not issubclass(annotation, Event):
        return False
    return event_type is None or issubclass(event_type, annotation)


def resolve(observer: Any, name: str, event_type: Optional[type] = None) -> Optional[Callable[[Event], None]]:
    """Return observer's handler called name as a bound method, or None.

    With event_type given, the handler's parameter must accept that type.
    """
    if observer is None or not name:
        return None

    attr_name = handler_table(type(observer)).get(name)
    # Look the attribute up again so unmarked overrides and shadowing apply
    func = getattr(type(observer), attr_name, None) if attr_name else None
    if not inspect.isfunction(func):
        logger.debug("No handler %r on %s", name, type(observer).__name__)
        return None
    if not _accepts(func, event_type):
        logger.debug("Handler %r on %s has an incompatible signature", name, type(observer).__name__)
        return None
    return func.__get__(observer, type(observer))
