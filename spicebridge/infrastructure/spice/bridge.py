"""
Bridge between Python call outcomes and the toolkit's global error record.

The toolkit keeps a single process-wide error flag plus message buffers.
Every bridged call follows the same protocol:

    1. clear any stale error left by earlier, unbridged activity
    2. invoke the toolkit routine(s)
    3. inspect the flag; on error capture the short token, long message,
       explanation and traceback
    4. reset the flag
    5. return Success(value) or Failure(code, message)

A Python exception raised by the call body also becomes a Failure:
validation errors keep their own SPICEBRIDGE code and anything else is
logged with its traceback and reported as SPICEBRIDGE(UNEXPECTEDERROR).
Only BaseException subclasses such as KeyboardInterrupt pass through.

The flag is clear after every bridged call, whatever the outcome. This
module is the only place that touches the error primitives (failed, getmsg,
reset, sigerr, setmsg, erract, errdev, errprt).

The bridge holds no lock. The toolkit is not thread-safe; callers that share
it across threads must serialise access themselves.
"""

from collections.abc import Callable
from typing import Any

import spiceypy as spice
from spiceypy.utils.exceptions import SpiceyError

from spicebridge.domain.constants import (
    EXPLAIN_MSG_LEN,
    LONG_MSG_LEN,
    OPTION_LEN,
    SHORT_MSG_LEN,
    TRACEBACK_LEN,
)
from spicebridge.domain.exceptions import ValidationError
from spicebridge.domain.models.enums import ErrorAction, ErrorDevice, ErrorOutputItem
from spicebridge.domain.models.results import (
    CallResult,
    Failure,
    LookupResult,
    NotFound,
    Success,
)
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)

UNKNOWN_ERROR = "SPICEBRIDGE(UNKNOWNERROR)"
UNEXPECTED_ERROR = "SPICEBRIDGE(UNEXPECTEDERROR)"

# Printable items in the order the toolkit lists them
_ITEM_WORDS = (
    (ErrorOutputItem.SHORT, "SHORT"),
    (ErrorOutputItem.EXPLAIN, "EXPLAIN"),
    (ErrorOutputItem.LONG, "LONG"),
    (ErrorOutputItem.TRACEBACK, "TRACEBACK"),
    (ErrorOutputItem.DEFAULT, "DEFAULT"),
)


def _name_of(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def items_to_words(items: ErrorOutputItem) -> str:
    """Render an item set as the word list errprt accepts, e.g. 'NONE, SHORT, LONG'."""
    words = [word for flag, word in _ITEM_WORDS if items & flag]
    return ", ".join(["NONE", *words])


def words_to_items(words: str) -> ErrorOutputItem:
    """Parse the word list errprt reports back into an item set."""
    items = ErrorOutputItem.NONE
    for word in (w.strip().upper() for w in words.split(",")):
        if word == "ALL":
            items |= ErrorOutputItem.ALL
        elif word == "NONE":
            items = ErrorOutputItem.NONE
        else:
            for flag, name in _ITEM_WORDS:
                if word == name:
                    items |= flag
    return items


class ErrorStateBridge:
    """Runs toolkit routines under the clear/invoke/inspect/reset protocol."""

    def __init__(self):
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Put the toolkit in bridged mode: return on error instead of aborting,
        and print nothing. Diagnostics go through logging instead.
        Safe to call repeatedly.
        """
        spice.erract("SET", OPTION_LEN, ErrorAction.RETURN.value)
        spice.errdev("SET", OPTION_LEN, ErrorDevice.NULL.value)
        spice.errprt("SET", OPTION_LEN, "NONE")
        spice.reset()
        if not self._initialized:
            logger.debug("Toolkit error handling set to RETURN with output suppressed")
        self._initialized = True

    # ── protocol ──

    def call(self, func: Callable[..., Any], *args, **kwargs) -> CallResult:
        """Invoke ``func`` under the bridge and translate the outcome."""
        name = _name_of(func)
        self._clear_stale(name)
        try:
            value = func(*args, **kwargs)
        except SpiceyError as error:
            failure = self._from_exception(error)
        except ValidationError as error:
            failure = Failure(error.code, str(error))
        except Exception as error:
            logger.exception("%s raised %s", name, type(error).__name__)
            failure = Failure(UNEXPECTED_ERROR, f"{type(error).__name__}: {error}")
        else:
            if not spice.failed():
                logger.debug("%s succeeded", name)
                return Success(value)
            failure = self._capture()
        finally:
            if spice.failed():
                spice.reset()

        logger.warning("%s failed: %s %s", name, failure.code, failure.message)
        return failure

    def lookup(self, func: Callable[..., Any], *args, what: str = "", **kwargs) -> LookupResult:
        """
        Invoke a found-style routine. ``func`` must return ``(value, found)``
        and runs with the toolkit's own not-found exception disabled.
        """

        def invoke():
            with spice.no_found_check():
                return func(*args, **kwargs)

        invoke.__qualname__ = _name_of(func)
        outcome = self.call(invoke)
        if not outcome.ok:
            return outcome

        value, found = outcome.value
        if not found:
            logger.debug("%s found nothing%s", invoke.__qualname__, f" for {what}" if what else "")
            return NotFound(what)
        return Success(value)

    def status(self) -> CallResult:
        """
        Report the current global state as an outcome, then clear it.
        Success(None) when no error is pending.
        """
        if spice.failed():
            return self._capture()
        return Success(None)

    def reset(self) -> None:
        spice.reset()

    def signal(self, token: str, message: str = "") -> None:
        """
        Raise a toolkit error with the given short token and long message.
        Only meaningful inside a bridged call, which turns it into a Failure.

        Under the IGNORE error action the toolkit records nothing, so the
        same token and message are raised locally instead.
        """
        if message:
            spice.setmsg(message)
        spice.sigerr(token)
        if spice.failed():
            raise self._to_exception(self._capture())
        raise self._to_exception(Failure(token, message))

    # ── administration ──

    def get_error_action(self) -> ErrorAction:
        return ErrorAction(spice.erract("GET", OPTION_LEN, "").strip().upper())

    def set_error_action(self, action: ErrorAction) -> None:
        action = ErrorAction(action)
        if action in (ErrorAction.ABORT, ErrorAction.DEFAULT):
            logger.warning(
                "Error action %s terminates the process on the next toolkit error", action.value
            )
        spice.erract("SET", OPTION_LEN, action.value)
        logger.info("Toolkit error action set to %s", action.value)

    def get_error_device(self) -> str:
        return spice.errdev("GET", OPTION_LEN, "").strip()

    def set_error_device(self, device: ErrorDevice | str) -> None:
        device = device.value if isinstance(device, ErrorDevice) else str(device)
        spice.errdev("SET", OPTION_LEN, device)
        logger.info("Toolkit error device set to %s", device)

    def get_error_items(self) -> ErrorOutputItem:
        return words_to_items(spice.errprt("GET", OPTION_LEN, ""))

    def set_error_items(self, items: ErrorOutputItem) -> None:
        words = items_to_words(ErrorOutputItem(items))
        spice.errprt("SET", OPTION_LEN, words)
        logger.info("Toolkit error output items set to %s", words)

    # ── internals ──

    def _clear_stale(self, name: str) -> None:
        if spice.failed():
            stale = self._capture()
            logger.warning("Cleared stale toolkit error %s before %s", stale.code, name)

    def _capture(self) -> Failure:
        short = spice.getmsg("SHORT", SHORT_MSG_LEN).strip()
        explain = spice.getmsg("EXPLAIN", EXPLAIN_MSG_LEN).strip()
        long = spice.getmsg("LONG", LONG_MSG_LEN).strip()
        trace = spice.qcktrc(TRACEBACK_LEN).strip()
        spice.reset()
        return Failure(short or UNKNOWN_ERROR, long, explain, trace)

    @staticmethod
    def _from_exception(error: SpiceyError) -> Failure:
        short = (getattr(error, "short", "") or "").strip()
        if not short:
            short = f"SPICEBRIDGE({type(error).__name__.upper()})"
        long = (getattr(error, "long", "") or "").strip() or str(error)
        return Failure(
            short,
            long,
            (getattr(error, "explain", "") or "").strip(),
            (getattr(error, "traceback", "") or "").strip(),
        )

    @staticmethod
    def _to_exception(failure: Failure) -> SpiceyError:
        return SpiceyError(
            short=failure.code,
            explain=failure.explain,
            long=failure.message,
            traceback=failure.traceback,
        )


bridge = ErrorStateBridge()
bridge.initialize()
