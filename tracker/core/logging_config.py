import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "tarot-client-tracker"

# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


class TrackerJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(TrackerJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        log_record['level'] = (log_record.get('level') or record.levelname).upper()
        log_record['service'] = SERVICE_NAME
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO"):
    """
    Sends JSON log lines to stdout from the root logger.

    Calling it again only changes the level; the handler is installed once.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    if any(isinstance(h.formatter, TrackerJsonFormatter) for h in root_logger.handlers):
        root_logger.debug(f"JSON logging already configured, level now {logging.getLevelName(log_level)}")
        return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(TrackerJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    root_logger.addHandler(log_handler)
    root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
