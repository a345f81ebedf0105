"""
Administrative entry points: toolkit reset, error-handling configuration
and test support.
"""

import spiceypy as spice

from spicebridge.domain.models.enums import ErrorAction, ErrorDevice, ErrorOutputItem
from spicebridge.domain.models.results import CallResult
from spicebridge.domain.validators import validate_option
from spicebridge.infrastructure.spice.bridge import bridge
from spicebridge.infrastructure.spice.decorators import spice_call
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)


@spice_call
def init_all() -> None:
    """Unload every kernel, clear the pool and restore bridged error handling."""
    spice.kclear()
    bridge.initialize()
    logger.info("Toolkit reinitialized")


@spice_call
def clear_all() -> None:
    """Unload every kernel and clear the kernel pool."""
    spice.kclear()


def reset() -> None:
    """Clear the global error state."""
    bridge.reset()


@spice_call
def get_erract() -> ErrorAction:
    return bridge.get_error_action()


@spice_call
def set_erract(action: ErrorAction | str) -> None:
    bridge.set_error_action(validate_option(ErrorAction, action))


@spice_call
def get_errdev() -> str:
    """Current error output device: SCREEN, NULL or a file name."""
    return bridge.get_error_device()


@spice_call
def set_errdev(device: ErrorDevice | str) -> None:
    bridge.set_error_device(device)


@spice_call
def get_errprt() -> ErrorOutputItem:
    return bridge.get_error_items()


@spice_call
def set_errprt(items: ErrorOutputItem) -> None:
    bridge.set_error_items(items)


@spice_call
def raise_spice_error(
    message: str = "This is a test error.",
    token: str = "SPICE(VALUEOUTOFRANGE)",
) -> None:
    """Signal an arbitrary toolkit error. The call always returns a Failure."""
    bridge.signal(token, message)


def get_implied_result() -> CallResult:
    """Outcome implied by the current global error state, which is then cleared."""
    return bridge.status()
