import logging
import logging.handlers
import os
import re
import sys
from collections import deque
from datetime import datetime
from typing import Optional

from habbus.config import LOGS_DIR, MAX_LOGS

ANSI_ESCAPE = re.compile(r'[\u001b\u009b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]')


def strip_ansi(text: str) -> str:
    """Remove terminal color codes so lines render cleanly on the dashboard."""
    return ANSI_ESCAPE.sub('', text)


class StreamToLogger:
    """
    Fake file-like stream object that redirects writes to a logger instance.
    """
    def __init__(self, logger, log_level=logging.INFO):
        self.logger = logger
        self.log_level = log_level

    def write(self, buf):
        for line in buf.rstrip().splitlines():
            self.logger.log(self.log_level, line.rstrip())

    def flush(self):
        pass


class LogBuffer(logging.Handler):
    """
    Keeps the most recent log records in memory for the /api/logs endpoint.

    Each entry is a dict with ``time`` (HH:MM:SS), ``type`` ('info' or
    'error') and ``msg`` (message text without ANSI codes).
    """

    def __init__(self, capacity: int = MAX_LOGS):
        super().__init__()
        self._entries = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = strip_ansi(record.getMessage())
        except Exception:
            self.handleError(record)
            return
        self._entries.append({
            'time': datetime.fromtimestamp(record.created).strftime('%H:%M:%S'),
            'type': 'error' if record.levelno >= logging.ERROR else 'info',
            'msg': msg,
        })

    def entries(self) -> list[dict]:
        """Return a snapshot of buffered entries, oldest first."""
        return list(self._entries)


def setup_logging(log_buffer: Optional[LogBuffer] = None, redirect_std: bool = True):
    """
    Sets up daily rotating logging and redirects stdout/stderr to the logger.

    Args:
        log_buffer: Optional in-memory handler feeding the dashboard.
        redirect_std: Send print() output and tracebacks through logging too.
    """
    if not os.path.exists(LOGS_DIR):
        os.makedirs(LOGS_DIR)

    log_filename = LOGS_DIR / f"{datetime.now().strftime('%Y-%m-%d')}.log"

    logger = logging.getLogger()
    logger.setLevel(logging.INFO)

    # Prevent duplicate handlers if setup_logging is called multiple times
    if logger.handlers:
        return

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_filename,
        when="D",
        interval=1,
        backupCount=30,
        encoding="utf-8"
    )

    # Format: [2026-01-07 20:35:46] [INFO] Message
    formatter = logging.Formatter('[%(asctime)s] [%(levelname)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.__stdout__)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_buffer is not None:
        logger.addHandler(log_buffer)

    if redirect_std:
        sys.stdout = StreamToLogger(logger, logging.INFO)
        sys.stderr = StreamToLogger(logger, logging.ERROR)

    logging.info("Logging initialized. Output redirected to log file.")
