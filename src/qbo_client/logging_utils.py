"""
Logging helpers for applications using qbo_client.

The library itself only calls ``logging.getLogger(__name__)``; these
helpers are for scripts that want the same colorized JSON output for the
request/response records emitted by the services.
"""

import json
import logging
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pythonjsonlogger.json import JsonFormatter


class CustomJsonEncoder(json.JSONEncoder):
    """JSON encoder that handles datetime, date, and Decimal objects."""

    def default(self, o):
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        elif isinstance(o, Decimal):
            # amounts stay exact in the log line
            return str(o)
        return super().default(o)


class ColorizedJsonFormatter(JsonFormatter):
    """JSON formatter that adds syntax highlighting to the output."""

    def __init__(self, *args, colorize: bool = True, **kwargs):
        super().__init__(*args, **kwargs, json_default=CustomJsonEncoder().default)
        self.colorize = colorize

    def format(self, record: Any) -> str:
        json_str = super().format(record)
        if not self.colorize:
            return json_str
        return highlight(json_str, JsonLexer(), TerminalFormatter()).rstrip("\n")


def setup_json_logger(level: int = logging.INFO, colorize: bool | None = None) -> None:
    """
    Configure the root logger with JSON formatting.

    Colors are on by default only when stdout is a terminal.
    """
    if colorize is None:
        colorize = sys.stdout.isatty()
    json_handler = logging.StreamHandler(sys.stdout)
    json_formatter = ColorizedJsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s", colorize=colorize
    )
    json_handler.setFormatter(json_formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.addHandler(json_handler)
    root_logger.setLevel(level)
