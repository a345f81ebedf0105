from enum import Enum
from functools import wraps
from inspect import signature

from spicebridge.infrastructure.spice.bridge import bridge
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)


def spice_call(func):
    """
    Decorator running the wrapped body under the error-state bridge.

    The body marshals its inputs, calls the toolkit and marshals the outputs;
    it returns the plain value. Callers receive Success(value) or Failure.
    Local validation errors raised by the body become a Failure as well.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"Calling {func.__name__}")
        return bridge.call(func, *args, **kwargs)

    return wrapper


def spice_lookup(what: str = ""):
    """
    Decorator for found-style calls. The wrapped body returns ``(value, found)``;
    callers receive Success(value), NotFound or Failure.

    ``what`` is a format string describing the looked-up item, filled from the
    call's keyword and positional arguments, e.g. ``"pool variable {name}"``.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            description = _describe(what, func, args, kwargs)
            logger.debug(f"Looking up {description or func.__name__}")
            return bridge.lookup(func, *args, what=description, **kwargs)

        return wrapper

    return decorator


def _describe(template: str, func, args, kwargs) -> str:
    if not template:
        return ""
    try:
        bound = signature(func).bind(*args, **kwargs)
        bound.apply_defaults()
        words = {k: v.value if isinstance(v, Enum) else v for k, v in bound.arguments.items()}
        return template.format(**words)
    except (TypeError, KeyError, IndexError):
        return template
