"""Console logging for the CHECKEDOPS CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``; the
CLI attaches the Rich handler built here. Each console line is tagged with
where it came from: records from checkedops' own modules carry the module name
(``[operations]``), records from other libraries their top-level package
(``[click_extra]``). At ``-vv`` this keeps guard rejections apart from library
chatter.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from checkedops.config import IntegerBounds

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "checkedops"

# Libraries kept at WARNING unless overridden with -L NAME=LEVEL
DEFAULT_LOGGER_LEVELS = {"click_extra": logging.WARNING}

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def record_origin(name: str) -> str:
    """Return the bracketed origin tag shown before a console message.

    Args:
        name: The logger name of the record.

    Returns:
        str: ``"[operations]"`` for ``checkedops.operations``, ``""`` for the
        bare ``checkedops`` logger, ``"[urllib3]"`` for
        ``urllib3.connectionpool``.
    """
    if name == PROJECT_PREFIX:
        return ""
    if name.startswith(f"{PROJECT_PREFIX}."):
        return f"[{name.rsplit('.', 1)[-1]}]"
    return f"[{name.split('.')[0]}]"


class OriginFilter(logging.Filter):
    """Set ``record.origin`` for `CONSOLE_FORMAT`. Never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.origin = record_origin(record.name)
        return True


def console_handler(
    level: int = logging.WARNING, *, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr RichHandler the CLI attaches to the root logger.

    In debug mode the level drops to DEBUG and lines show a timestamp, the
    full logger name and the emitting source line in place of the origin tag.

    Args:
        level: Minimum level shown (ignored in debug mode).
        debug_mode: Switch to the diagnostic layout described above.
        color: False disables color, matching click-extra's ``--no-color``.

    Returns:
        RichHandler: The configured handler.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=DEBUG_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    if not debug_mode:
        handler.addFilter(OriginFilter())
    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    bounds: IntegerBounds,
    logger_levels: dict[str, int],
) -> None:
    """Log a human-friendly startup line and detailed diagnostics.

    Emits an informational one-line summary with the application version,
    console level and integer width. DEBUG-level diagnostics follow for
    troubleshooting: Python and platform versions, process id, working
    directory, the active handler types and any per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        bounds: Integer bounds the integer operations will enforce.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "CHECKEDOPS %s (console=%s, int%s)",
        app_version,
        logging.getLevelName(level),
        bounds.bits,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Integer range: [%s, %s]", bounds.minimum, bounds.maximum)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
