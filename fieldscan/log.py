import json
import logging
import sys
import time
import traceback

from structlog import configure, DropEvent, PrintLogger
from structlog.stdlib import add_log_level
from structlog.processors import format_exc_info, StackInfoRenderer


# from: structlog/stdlib.py
_NAME_TO_LEVEL = {
    'critical': logging.CRITICAL,
    'exception': logging.ERROR,
    'error': logging.ERROR,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'info': logging.INFO,
    'debug': logging.DEBUG,
    'notset': logging.NOTSET,
}


def add_timestamp(logger, name, event_dict):
    event_dict['timestamp'] = time.time()
    return event_dict


class LogDispatcher:
    """Processor that hands every event to extra handlers before rendering."""

    def __init__(self):
        self.handlers = []

    def add_handler(self, handler):
        self.handlers.append(handler)

    def remove_handler(self, handler):
        self.handlers.remove(handler)

    def __call__(self, logger, name, event_dict):
        for handler in list(self.handlers):
            try:
                handler(logger, name, dict(event_dict))
            except Exception:
                print('exception thrown by handler %r' % (handler,), file=sys.stderr)
                traceback.print_exc()

        return event_dict


class LogWriter:
    """Handler appending events to a file as JSON lines."""

    def __init__(self, filename):
        self.filename = filename
        self._fp = open(self.filename, 'at', encoding='utf8')

    def __call__(self, logger, name, event_dict):
        string = json.dumps(event_dict, default=_json_fallback)
        self._fp.write(string + '\n')
        self._fp.flush()

    def close(self):
        self._fp.close()

    @property
    def closed(self):
        return self._fp.closed


# from structlog/processors.py
def _json_fallback(obj):
    try:
        serializer = obj.__json__
    except AttributeError:
        return repr(obj)
    else:
        return serializer()


class LogRenderer:
    def __init__(self, level=logging.INFO):
        self.level = level

    def __call__(self, logger, name: str, event_dict):
        if _NAME_TO_LEVEL.get(name, logging.INFO) < self.level:     # filter by level
            raise DropEvent

        event = event_dict['event']
        name = name.upper()
        pairs = ' '.join(
            '%s=%s' % (key, value)
            for key, value in event_dict.items()
            if key not in {'event', 'level', 'timestamp'}
        )
        return '{name:9s}{event}: {pairs}'.format_map(locals())


def stderr_logger_factory(*args):
    # look up sys.stderr on each call, it may have been replaced since configure()
    return PrintLogger(file=sys.stderr)


LOG_DISPATCHER = LogDispatcher()


def verbose_level(verbose: int):
    if verbose >= 2:
        return logging.DEBUG
    elif verbose >= 1:
        return logging.INFO
    else:
        return logging.WARNING


def config_logger(verbose=0, logfile=None):
    """Reconfigure logging; return the LogWriter added for ``logfile``, if any."""
    writer = None
    if logfile is not None:
        writer = LogWriter(logfile)
        LOG_DISPATCHER.add_handler(writer)

    processors = [
        add_log_level,
        add_timestamp,
        format_exc_info,
        StackInfoRenderer(),
        LOG_DISPATCHER,
        LogRenderer(level=verbose_level(verbose)),
    ]
    configure(processors=processors, logger_factory=stderr_logger_factory)
    return writer
