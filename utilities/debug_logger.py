"""Simple debug logger utilities used when --debug mode is enabled.

Provides an in-memory buffer and a file handler that will be flushed on
finalization (including on errors / KeyboardInterrupt).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path


LOGGER_NAME = "stream_search_debug"

_logger: logging.Logger | None = None
_buffer: list[str] = []
_log_file: Path | None = None


def init_debug(log_dir: Path | None = None) -> logging.Logger:
    """Initialize the debug logger.

    Creates a logger that writes debug messages to a timestamped file inside
    the given log_dir (defaults to cwd). Also keeps a small in-memory buffer
    of messages to ensure they can be flushed on abrupt termination.
    """
    global _logger, _log_file

    if _logger is not None:
        return _logger

    log_dir = Path(log_dir) if log_dir is not None else Path.cwd()
    log_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    logfile = log_dir / f"stream_search_debug_{ts}.log"
    _log_file = logfile

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # File handler only (silent on console)
    fh = logging.FileHandler(str(logfile), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    _logger = logger

    _buffer.append(f"Debug log initialized: {logfile}\n")

    return logger


def get_logger() -> logging.Logger | None:
    return _logger


def buffer(msg: str, level: str = "DEBUG") -> None:
    """Store a message in the in-memory buffer and send it to logger.

    The in-memory buffer stores lines prefixed with the level (e.g. "INFO: ...").
    The logger is called with the matching level so the file output also
    contains a level on the left.
    """
    _buffer.append(f"{level}: {msg}")

    if _logger is not None:
        lvl = logging.getLevelName(level.upper())
        if not isinstance(lvl, int):
            lvl = logging.DEBUG
        _logger.log(lvl, msg.rstrip("\n"))


def finalize() -> None:
    """Write the in-memory buffer to the log file and close its handlers.

    Safe to call multiple times.
    """
    global _logger, _log_file

    if _log_file is None:
        return

    if _logger is not None:
        for handler in list(_logger.handlers):
            handler.close()
            _logger.removeHandler(handler)

    try:
        if _buffer:
            with open(_log_file, "a", encoding="utf-8") as f:
                f.write("\n# In-memory buffer:\n")
                for line in _buffer:
                    f.write(line.rstrip("\n") + "\n")
    except OSError:
        # Best-effort only
        pass
    finally:
        _buffer.clear()

    _logger = None
    _log_file = None
