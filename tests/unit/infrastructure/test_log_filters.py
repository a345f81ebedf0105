import logging

from spicebridge.log_filters import TruncatingFilter


def make_record(msg, args=()):
    return logging.LogRecord("spicebridge.test", logging.WARNING, __file__, 1, msg, args, None)


class TestTruncatingFilter:
    def test_long_arguments_are_shortened(self):
        record = make_record("%s failed: %s", ("call", "x" * 50))
        assert TruncatingFilter(max_length=10).filter(record)
        assert record.getMessage() == "call failed: xxxxxxxxxx..."

    def test_short_arguments_are_untouched(self):
        record = make_record("%s %d", ("ok", 5))
        TruncatingFilter(max_length=10).filter(record)
        assert record.getMessage() == "ok 5"

    def test_preformatted_message(self):
        record = make_record("y" * 20)
        TruncatingFilter(max_length=5).filter(record)
        assert record.getMessage() == "yyyyy..."
