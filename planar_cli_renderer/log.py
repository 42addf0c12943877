#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/log.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Logging
# LOG_REF: 2026-10-18
#

import logging

_LOGGER_CONFIGURED = False


def setup_logging(level=logging.WARNING, log_file=None) -> None:
    """
    Configure the root logger for the demo application.

    curses owns the terminal while the demo runs, so records only go to
    ``log_file`` when one is given and are discarded otherwise. Library
    modules never call this.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    root = logging.getLogger()
    root.setLevel(level)

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    else:
        handler = logging.NullHandler()
    handler.setLevel(level)
    root.addHandler(handler)

    _LOGGER_CONFIGURED = True
