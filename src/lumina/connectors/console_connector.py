# src/lumina/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import greeting
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

SEPARATOR = "_" * 66


def format_block(text: str, indent_width: int = 2) -> str:
    """Wrap a reply between separator lines, every body line indented."""
    pad = " " * indent_width
    body = "\n".join(pad + line for line in text.split("\n"))
    return f"{SEPARATOR}\n{body}\n{SEPARATOR}"


def run_console_loop(state: AppState) -> None:
    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "Lumina"))
    indent_width = int(getattr(settings, "indent_width", 2))

    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    print(format_block(greeting(app_name), indent_width))

    while True:
        try:
            print()
            line = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line.strip():
            continue

        reply = command_registry.handle(state, line)
        print(format_block(reply.text, indent_width))

        if reply.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
