"""Interactive prompts used by the overwrite and question flows."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import typer

from ..core.errors import ScaffoldCancelled

logger = logging.getLogger(__name__)

FAREWELL = "Stopping. Goodbye!"


class Prompter(Protocol):
    def confirm(self, message: str, *, default: bool = False) -> bool: ...

    def text(self, message: str, *, default: Any = None) -> Any: ...


class TyperPrompter:
    """Asks on the terminal; an interrupted prompt raises ScaffoldCancelled."""

    def confirm(self, message: str, *, default: bool = False) -> bool:
        try:
            return typer.confirm(message, default=default)
        except (typer.Abort, EOFError, KeyboardInterrupt) as e:
            raise ScaffoldCancelled(message) from e

    def text(self, message: str, *, default: Any = None) -> Any:
        try:
            return typer.prompt(message, default=default)
        except (typer.Abort, EOFError, KeyboardInterrupt) as e:
            raise ScaffoldCancelled(message) from e


class StaticPrompter:
    """Answers every confirmation the same way and accepts text defaults."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer

    def confirm(self, message: str, *, default: bool = False) -> bool:
        logger.debug(f"{message} -> {'yes' if self.answer else 'no'} (non-interactive)")
        return self.answer

    def text(self, message: str, *, default: Any = None) -> Any:
        if default is None:
            raise ScaffoldCancelled(f"No answer available for {message!r}")
        return default
