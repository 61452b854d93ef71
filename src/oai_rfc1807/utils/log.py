"""Structured logging for conversion runs.

Events are written as JSON lines to one file per session; a pretty console
renderer on stderr is optional so XML written to stdout stays clean.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import cast

import structlog

_PRE_CHAIN = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
)


def _attach(handler: logging.Handler, renderer: structlog.typing.Processor, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processors=[*_PRE_CHAIN, renderer]))
    logging.root.addHandler(handler)


def session_log_path(log_dir: Path, session_id: str | None = None) -> Path:
    """Path of the JSONL file for a session, named after its start time by default."""
    session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"session_{session_id}.jsonl"


def setup_logging(
    session_id: str | None = None,
    log_level: str = "INFO",
    console_output: bool = True,
    log_dir: Path | None = None,
) -> Path:
    """Route structlog events through stdlib logging to the session file.

    Calling it again replaces the handlers of the previous call, so the CLI
    and tests can point a run at a different directory or level.

    Returns:
        The session log file Path.
    """
    log_dir = log_dir or Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = session_log_path(log_dir, session_id)
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.root.handlers.clear()
    logging.root.setLevel(level)
    _attach(
        logging.FileHandler(log_file, mode="a", encoding="utf-8"),
        structlog.processors.JSONRenderer(),
        level,
    )
    if console_output:
        _attach(logging.StreamHandler(), structlog.dev.ConsoleRenderer(), level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return log_file


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for a module/package."""
    return cast(structlog.BoundLogger, structlog.get_logger(name))
