import logging

import pytest
import spiceypy as spice

from spicebridge.domain.exceptions import MarshalingError, ValidationError
from spicebridge.domain.models.enums import ErrorAction, ErrorOutputItem
from spicebridge.domain.models.results import Failure, NotFound, Success
from spicebridge.infrastructure.spice.bridge import (
    UNEXPECTED_ERROR,
    UNKNOWN_ERROR,
    ErrorStateBridge,
    bridge,
    items_to_words,
    words_to_items,
)
from tests.mocks import inject_stale_error


class TestCall:
    def test_success_wraps_return_value(self):
        assert bridge.call(lambda a, b: a + b, 1, b=2) == Success(3)
        assert not spice.failed()

    def test_toolkit_error_becomes_failure(self):
        outcome = bridge.call(spice.bodvrd, "NO_SUCH_BODY", "RADII", 3)
        assert isinstance(outcome, Failure)
        assert outcome.code.startswith("SPICE(")
        assert outcome.message
        assert not spice.failed()

    def test_signalled_error_keeps_token_and_message(self):
        outcome = bridge.call(bridge.signal, "SPICE(CUSTOMTOKEN)", "Something went wrong.")
        assert outcome.code == "SPICE(CUSTOMTOKEN)"
        assert "Something went wrong." in outcome.message
        assert not spice.failed()

    def test_validation_error_becomes_failure(self):
        def body():
            raise ValidationError("bad argument")

        assert bridge.call(body) == Failure(ValidationError.code, "bad argument")

    def test_marshaling_error_keeps_its_code(self):
        def body():
            raise MarshalingError("bad shape")

        assert bridge.call(body).code == MarshalingError.code

    def test_unexpected_exception_becomes_failure(self, caplog):
        def body():
            raise KeyError("bug")

        with caplog.at_level(logging.ERROR, logger="spicebridge"):
            outcome = bridge.call(body)

        assert outcome.code == UNEXPECTED_ERROR
        assert outcome.message == "KeyError: 'bug'"
        assert "Traceback" in caplog.text
        assert not spice.failed()

    def test_unexpected_exception_with_flag_set_leaves_flag_clear(self):
        def body():
            inject_stale_error("SPICE(HALFWAY)")
            raise RuntimeError("late")

        outcome = bridge.call(body)
        assert outcome.code == UNEXPECTED_ERROR
        assert not spice.failed()

    def test_interrupts_pass_through(self):
        def body():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            bridge.call(body)

    def test_stale_error_is_cleared_first(self, caplog):
        inject_stale_error("SPICE(STALEERROR)")
        assert spice.failed()

        with caplog.at_level(logging.WARNING, logger="spicebridge"):
            outcome = bridge.call(lambda: "fresh")

        assert outcome == Success("fresh")
        assert "SPICE(STALEERROR)" in caplog.text
        assert not spice.failed()

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spicebridge"):
            bridge.call(bridge.signal, "SPICE(LOGGED)", "logged message")
        assert "SPICE(LOGGED)" in caplog.text


class TestLookup:
    def test_found(self):
        assert bridge.lookup(lambda: (399, True)) == Success(399)

    def test_not_found_is_distinct_from_failure(self):
        outcome = bridge.lookup(lambda: (0, False), what="body NOBODY")
        assert outcome == NotFound("body NOBODY")
        assert outcome.ok

    def test_error_inside_lookup(self):
        def body():
            bridge.signal("SPICE(LOOKUPFAILED)", "no")
            return (0, True)

        assert bridge.lookup(body).code == "SPICE(LOOKUPFAILED)"

    def test_toolkit_found_flag_is_returned(self):
        outcome = bridge.lookup(spice.bodn2c, "NO SUCH BODY NAME")
        assert isinstance(outcome, NotFound)


class TestStatus:
    def test_clear_state(self):
        assert bridge.status() == Success(None)

    def test_pending_error_is_reported_and_cleared(self):
        inject_stale_error("SPICE(PENDING)", "pending message")
        outcome = bridge.status()
        assert outcome.code == "SPICE(PENDING)"
        assert "pending message" in outcome.message
        assert not spice.failed()
        assert bridge.status() == Success(None)


class TestConfiguration:
    def test_initialized_state(self):
        assert bridge.initialized
        assert bridge.get_error_action() is ErrorAction.RETURN
        assert bridge.get_error_device() == "NULL"
        assert bridge.get_error_items() == ErrorOutputItem.NONE

    def test_initialize_is_idempotent(self):
        other = ErrorStateBridge()
        other.initialize()
        other.initialize()
        assert other.get_error_action() is ErrorAction.RETURN

    def test_error_items_round_trip(self):
        bridge.set_error_items(ErrorOutputItem.SHORT | ErrorOutputItem.LONG)
        assert bridge.get_error_items() == ErrorOutputItem.SHORT | ErrorOutputItem.LONG

    def test_report_action_is_allowed(self):
        bridge.set_error_action(ErrorAction.REPORT)
        assert bridge.get_error_action() is ErrorAction.REPORT

    def test_terminating_action_warns(self, caplog):
        # set and immediately restore; the toolkit is never asked to fail meanwhile
        with caplog.at_level(logging.WARNING, logger="spicebridge"):
            bridge.set_error_action(ErrorAction.ABORT)
        bridge.set_error_action(ErrorAction.RETURN)
        assert "terminates the process" in caplog.text


class TestItemWords:
    @pytest.mark.parametrize(
        "items, words",
        [
            (ErrorOutputItem.NONE, "NONE"),
            (ErrorOutputItem.SHORT, "NONE, SHORT"),
            (ErrorOutputItem.SHORT | ErrorOutputItem.TRACEBACK, "NONE, SHORT, TRACEBACK"),
        ],
    )
    def test_items_to_words(self, items, words):
        assert items_to_words(items) == words

    @pytest.mark.parametrize(
        "words, items",
        [
            ("", ErrorOutputItem.NONE),
            ("NONE", ErrorOutputItem.NONE),
            ("short, long", ErrorOutputItem.SHORT | ErrorOutputItem.LONG),
            ("ALL", ErrorOutputItem.ALL),
            ("ALL, NONE, EXPLAIN", ErrorOutputItem.EXPLAIN),
        ],
    )
    def test_words_to_items(self, words, items):
        assert words_to_items(words) == items


def test_unknown_error_token_is_namespaced():
    assert UNKNOWN_ERROR.startswith("SPICEBRIDGE(")
