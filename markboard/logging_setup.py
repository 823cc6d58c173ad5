from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from markboard.settings import APP_NAME, LOG_DIR, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"

# QWebEnginePage.JavaScriptConsoleMessageLevel: info, warning, error
WEB_CONSOLE_LEVELS = {0: logging.INFO, 1: logging.WARNING, 2: logging.ERROR}

# QtMsgType: debug, warning, critical, fatal, info
QT_MESSAGE_LEVELS = {
    0: logging.DEBUG,
    1: logging.WARNING,
    2: logging.ERROR,
    3: logging.CRITICAL,
    4: logging.INFO,
}


class SessionFilter(logging.Filter):
    """Stamp every record with the run id, including records from child loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """`markboard` or one of its children (`markboard.loader`, `markboard.web`, ...)."""
    base = logging.getLogger(APP_NAME)
    return base.getChild(name) if name else base


def setup_logging(*, console_level: int = logging.INFO) -> logging.Logger:
    """Attach the file and console handlers once; later calls are no-ops."""
    logger = get_logger()
    if logger.handlers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = SessionFilter()

    fh = RotatingFileHandler(
        LOG_PATH, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)

    ch = logging.StreamHandler(sys.stdout or sys.stderr)
    ch.setLevel(console_level)

    for handler in (fh, ch):
        handler.setFormatter(fmt)
        handler.addFilter(session_filter)
        logger.addHandler(handler)

    logger.info("Logging initialized. log_file=%s sid=%s", LOG_PATH, SESSION_ID)
    return logger


def _level_of(value, table: dict[int, int], default: int) -> int:
    # PySide6 enums expose .value, older bindings are plain ints
    raw = getattr(value, "value", value)
    try:
        return table.get(int(raw), default)
    except (TypeError, ValueError):
        return default


def log_web_console(level, message: str, line: int, source_id: str) -> None:
    get_logger("web").log(
        _level_of(level, WEB_CONSOLE_LEVELS, logging.INFO),
        "console: %s | where=%s:%s", message, source_id or "inline", line,
    )


def install_global_exception_hooks() -> None:
    log = get_logger()

    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PySide6.QtCore import qInstallMessageHandler

    qt_log = get_logger("qt")

    def _qt_message_handler(mode, context, message):
        file = getattr(context, "file", None)
        line = getattr(context, "line", None)
        where = f"{file}:{line}" if file else "unknown"
        qt_log.log(_level_of(mode, QT_MESSAGE_LEVELS, logging.WARNING), "%s | where=%s", message, where)

    qInstallMessageHandler(_qt_message_handler)
    log.debug("Qt message handler installed")
