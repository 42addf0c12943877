#
# PROJECT: planar-cli-renderer
# MODULE: planar_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Configuration
# LOG_REF: 2026-10-18
#

import logging
import os
from dataclasses import dataclass

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class RenderConfig:
    """Configuration for the terminal rendering pipeline."""
    use_color: bool = True
    use_braille: bool = True
    view_scale: float = 8.0      # canvas pixels per world unit
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.view_scale or self.view_scale <= 0:
            raise ValueError(f"view_scale must be positive, got {self.view_scale!r}")
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        self.log_level = level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG, and PLANAR_LOG_LEVEL for the log level.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()
        level = os.environ.get('PLANAR_LOG_LEVEL', 'WARNING').upper()
        if level not in _LOG_LEVELS:
            level = 'WARNING'

        # Note: accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
            log_level=level,
        )
