# Console and logging management for the HR assistant backend.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.3.0

import logging
from typing import Any, Dict, Iterator, Tuple
from rich.logging import RichHandler
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)

if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)


def _flatten(arguments: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, str]]:
    """Yields ('reason', 'Grippe') style rows; nested mappings become dotted keys."""
    for key, value in arguments.items():
        label = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _flatten(value, prefix=f"{label}.")
        elif isinstance(value, list):
            yield label, ", ".join(map(str, value))
        else:
            yield label, str(value)


class ConsoleManager:
    """
    Console output of the HR assistant.

    Plain log records go through a RichHandler. Tool calls and failed
    supervisor turns get their own panels. Everything shown in those panels
    may come from the model or an employee, so it is rendered as Text and
    never parsed as Rich markup.
    """
    def __init__(self, logger_name: str = "HR-Assistant"):
        self._console = Console(theme=Theme({"logging.level.success": "bold green"}))
        self._logger = logging.getLogger(logger_name)
        if not self._logger.hasHandlers():
            self._logger.setLevel(logging.INFO)
            handler = RichHandler(console=self._console, rich_tracebacks=True, show_path=False, markup=False)
            handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
            self._logger.addHandler(handler)

    def info(self, message: str):
        self._logger.info(message)

    def success(self, message: str):
        self._logger.success(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def error(self, message: str):
        self._logger.error(message)

    def exception(self, message: str):
        self._logger.exception(message)

    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(Text(title, style=f"bold {style}"), style=style)

    def display_tool_call(self, tool_name: str, arguments: Dict[str, Any]):
        """Prints the arguments of one tool call as a two-column table."""
        table = Table(show_header=True, header_style="bold magenta", box=None, show_edge=False)
        table.add_column("Argument", style="cyan", no_wrap=True, width=20)
        table.add_column("Value", style="white")
        for label, value in _flatten(arguments):
            table.add_row(Text(label), Text(value))

        title = Text(f"Tool call: {tool_name}", style="bold green")
        self._console.print(Panel(table, title=title, border_style="green"))

    def display_turn_failure(self, title: str, detail: str):
        self._console.print(Panel(Text(detail), title=Text(title, style="bold red"), border_style="red"))

console = ConsoleManager()
