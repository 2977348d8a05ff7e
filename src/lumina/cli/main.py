# src/lumina/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store for the lifetime of the session,
builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    # unwinds through the `with TaskStore(...)` block, so the store is released
    raise SystemExit(0)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not in the main thread, or the platform has no SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    with TaskStore(settings.tasks_path) as store:
        state = create_initial_state(store, settings=settings)
        run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
