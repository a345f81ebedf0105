import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter

# Loggers that may echo the toolkit's long error messages (up to 1841 chars)
TRUNCATED_LOGGERS = (
    "spicebridge.infrastructure.spice.bridge",
    "spicebridge.infrastructure.spice.decorators",
)


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    max_length = env.int("LOG_TRUNCATE_LENGTH", 250)
    for name in TRUNCATED_LOGGERS:
        bridge_logger = logging.getLogger(name)
        bridge_logger.setLevel(numeric_level)
        bridge_logger.addFilter(TruncatingFilter(max_length=max_length))

    # Catch loggers created before setup_logging ran
    for logger_name in logging.Logger.manager.loggerDict:
        logger = logging.getLogger(logger_name)
        if logger.level == logging.NOTSET:
            logger.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
