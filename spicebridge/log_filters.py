import logging


class TruncatingFilter(logging.Filter):
    """Shortens oversized log arguments, e.g. the toolkit's long error messages."""

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _truncate(self, value: object) -> object:
        text = str(value)
        if len(text) > self.max_length:
            return text[: self.max_length] + "..."
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = {k: self._truncate(v) for k, v in record.args.items()}
        elif record.args:
            record.args = tuple(self._truncate(arg) for arg in record.args)
        elif isinstance(record.msg, str) and len(record.msg) > self.max_length:
            # Pre-formatted messages (f-strings)
            record.msg = record.msg[: self.max_length] + "..."
        return True
