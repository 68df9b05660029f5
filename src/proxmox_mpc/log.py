"""Console logging configuration.

Provides session-specific file logging for console diagnostics.
Logs are written to ~/.proxmox-mpc/logs/<session-id>.log
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".proxmox-mpc" / "logs"

# Root logger for the package
PACKAGE_LOGGER = "proxmox_mpc"

# Module-level state
_session_handler: Optional[logging.FileHandler] = None
_session_log_path: Optional[Path] = None


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure stderr logging for the package.

    Args:
        level: Level name or number; unknown names fall back to WARNING.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        pkg_logger.addHandler(handler)


def get_log_path(session_id: str) -> Path:
    """Get the log file path for a session."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / f"{session_id}.log"


def configure_session_logging(
    session_id: str,
    level: int = logging.DEBUG,
    log_path: Optional[Path] = None,
) -> Path:
    """Configure file logging for a console session.

    Sets up a file handler that captures all package logs for the given
    session. Call this when starting a session.

    Args:
        session_id: The session ID (uses first 8 chars)
        level: Logging level for file output (default DEBUG)
        log_path: Explicit log file, overrides the per-session path

    Returns:
        Path to the log file
    """
    global _session_handler, _session_log_path

    if log_path is None:
        short_id = session_id[:8] if len(session_id) > 8 else session_id
        log_path = get_log_path(short_id)
    else:
        log_path.parent.mkdir(parents=True, exist_ok=True)

    close_session_logging()

    _session_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _session_handler.setLevel(level)
    _session_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.addHandler(_session_handler)
    if pkg_logger.level == logging.NOTSET or pkg_logger.level > level:
        pkg_logger.setLevel(level)

    _session_log_path = log_path
    pkg_logger.info(f"=== Session started: {session_id} ===")

    return log_path


def close_session_logging() -> None:
    """Close the current session's file logging."""
    global _session_handler, _session_log_path

    if _session_handler is not None:
        pkg_logger = logging.getLogger(PACKAGE_LOGGER)
        pkg_logger.info("=== Session ended ===")

        pkg_logger.removeHandler(_session_handler)
        _session_handler.close()
        _session_handler = None
        _session_log_path = None


def get_current_log_path() -> Optional[Path]:
    """Get the current session's log file path, or None if not active."""
    return _session_log_path


def log_exception(
    error: BaseException,
    context: str = "",
    logger_name: str = PACKAGE_LOGGER,
) -> str:
    """Log an exception with full details.

    The traceback goes to the log; the returned message is the clean,
    user-facing text (the error's own message).

    Args:
        error: The exception to log
        context: Additional context about what was happening
        logger_name: Logger to write to

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger(logger_name)

    error_type = type(error).__name__
    error_msg = str(error) or error_type

    tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    logger.debug(f"{context}\n{error_type}: {error_msg}\n\nTraceback:\n{tb_str}")
    logger.info(f"{context}: {error_msg}" if context else f"{error_type}: {error_msg}")

    return error_msg
