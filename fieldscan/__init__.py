import logging

from structlog import get_logger, configure
from structlog.stdlib import add_log_level
from structlog.processors import format_exc_info, StackInfoRenderer

from fieldscan.log import add_timestamp, stderr_logger_factory, LOG_DISPATCHER, LogRenderer


processors = [
    add_log_level,
    add_timestamp,
    format_exc_info,
    StackInfoRenderer(),
    LOG_DISPATCHER,
    LogRenderer(level=logging.WARNING),
]
configure(processors=processors, logger_factory=stderr_logger_factory)

logger = get_logger(__name__)
