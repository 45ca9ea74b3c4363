"""Write strategies applied when materializing a single file.

Every strategy takes a source and an absolute destination path. A source is
either a ``Path`` to copy or read from, or in-memory content (``str`` or
``bytes``). Strategies never overwrite an existing file silently: the exclusive
writers fall back to asking for confirmation, the merge writers combine the
existing content with the source.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, Union

from ..core.errors import MalformedJsonError
from ..core.models import StrategyKind, WriteOutcome
from ..rendering.engine import render_template
from ..rendering.io import (
    atomic_write_bytes,
    atomic_write_text,
    copy_replace,
    ensure_parent,
    exclusive_copy,
    exclusive_write,
    read_text,
    read_text_if_exists,
)
from ..settings import get_settings
from .prompt import Prompter, StaticPrompter, TyperPrompter

logger = logging.getLogger(__name__)

Source = Union[Path, str, bytes]


def _as_bytes(content: str | bytes) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def _read_source_text(source: Source) -> str:
    if isinstance(source, Path):
        return read_text(source)
    if isinstance(source, bytes):
        return source.decode("utf-8")
    return source


class WriteStrategy(Protocol):
    def write(self, source: Source, destination: Path) -> WriteOutcome: ...


class ConfirmStrategy:
    """Overwrite the destination only after the user says yes."""

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter

    def write(self, source: Source, destination: Path) -> WriteOutcome:
        ensure_parent(destination)

        # ScaffoldCancelled from the prompter propagates to the caller
        should = self.prompter.confirm(f"Overwrite {destination}?", default=False)
        if not should:
            logger.info(f"Kept existing {destination}")
            return WriteOutcome.DECLINED

        if isinstance(source, Path):
            copy_replace(source, destination)
        else:
            atomic_write_bytes(destination, _as_bytes(source))
        logger.info(f"Overwrote {destination}")
        return WriteOutcome.OVERWRITTEN


class NormalStrategy:
    """Copy-if-absent; an existing destination goes through confirmation."""

    def __init__(self, confirm: ConfirmStrategy) -> None:
        self.confirm = confirm

    def write(self, source: Source, destination: Path) -> WriteOutcome:
        try:
            if isinstance(source, Path):
                exclusive_copy(source, destination)
            else:
                exclusive_write(destination, _as_bytes(source))
        except FileExistsError:
            logger.debug(f"{destination} exists, asking before overwrite")
            return self.confirm.write(source, destination)

        logger.info(f"Created {destination}")
        return WriteOutcome.WRITTEN


class TemplateStrategy:
    """Render the source with the answers, then write it if absent."""

    def __init__(self, answers: Mapping[str, Any], confirm: ConfirmStrategy) -> None:
        self.answers = answers
        self.confirm = confirm

    def write(self, source: Source, destination: Path) -> WriteOutcome:
        rendered = render_template(_read_source_text(source), self.answers)

        try:
            exclusive_write(destination, _as_bytes(rendered))
        except FileExistsError:
            logger.debug(f"{destination} exists, asking before overwrite")
            # Confirm with the rendered output, never the raw template
            return self.confirm.write(rendered, destination)

        logger.info(f"Rendered {destination}")
        return WriteOutcome.WRITTEN


class UniqueLinesStrategy:
    """Append source lines missing from the destination."""

    def __init__(self, normal: NormalStrategy) -> None:
        self.normal = normal

    def write(self, source: Source, destination: Path) -> WriteOutcome:
        existing = read_text_if_exists(destination)
        if not existing:
            return self.normal.write(source, destination)

        result = existing.split("\n")
        seen = set(result)
        added = 0
        for candidate in _read_source_text(source).split("\n"):
            if candidate not in seen:
                result.append(candidate)
                seen.add(candidate)
                added += 1

        atomic_write_text(destination, "\n".join(result))
        logger.info(f"Merged {added} new line(s) into {destination}")
        return WriteOutcome.MERGED


class JsonStrategy:
    """Shallow-merge the source JSON object into the destination.

    Keys from the source replace keys of the same name; nested objects are
    replaced wholesale rather than merged.
    """

    def __init__(self, indent: int = 4) -> None:
        self.indent = indent

    def _source_text(self, source: Source) -> str:
        return _read_source_text(source)

    def write(self, source: Source, destination: Path) -> WriteOutcome:
        existing = _load_destination_json(destination)
        data = _parse_json(self._source_text(source), f"source for {destination}")

        if existing is not None:
            if not isinstance(data, dict):
                raise MalformedJsonError(
                    f"Cannot merge non-object JSON into {destination}"
                )
            data = {**existing, **data}

        atomic_write_text(
            destination, json.dumps(data, indent=self.indent, ensure_ascii=False)
        )
        if existing is None:
            logger.info(f"Created {destination}")
            return WriteOutcome.WRITTEN
        logger.info(f"Merged JSON into {destination}")
        return WriteOutcome.MERGED


class JsonTemplateStrategy(JsonStrategy):
    """Render the source as a template before merging it as JSON."""

    def __init__(self, answers: Mapping[str, Any], indent: int = 4) -> None:
        super().__init__(indent=indent)
        self.answers = answers

    def _source_text(self, source: Source) -> str:
        return render_template(_read_source_text(source), self.answers)


def _parse_json(text: str, label: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"Invalid JSON in {label}: {e}") from e


def _load_destination_json(destination: Path) -> dict[str, Any] | None:
    text = read_text_if_exists(destination)
    if text is None:
        return None

    data = _parse_json(text, str(destination))
    if data is None:
        # A destination holding null has nothing to keep
        return None
    if not isinstance(data, dict):
        raise MalformedJsonError(f"Expected a JSON object in {destination}")
    return data


def default_prompter() -> Prompter:
    if get_settings().assume_yes:
        return StaticPrompter(True)
    return TyperPrompter()


def build_strategy(
    kind: StrategyKind,
    *,
    answers: Mapping[str, Any] | None = None,
    prompter: Prompter | None = None,
) -> WriteStrategy:
    """Build the strategy for a manifest entry.

    Args:
        kind: Which strategy to use
        answers: Answers context for the template strategies
        prompter: Prompt used when an existing file would be overwritten

    Returns:
        Strategy instance ready to write
    """
    kind = StrategyKind(kind)
    answers = answers if answers is not None else {}
    confirm = ConfirmStrategy(prompter or default_prompter())
    indent = get_settings().json_indent

    if kind is StrategyKind.NORMAL:
        return NormalStrategy(confirm)
    if kind is StrategyKind.TEMPLATE:
        return TemplateStrategy(answers, confirm)
    if kind is StrategyKind.CONFIRM:
        return confirm
    if kind is StrategyKind.UNIQUE_LINES:
        return UniqueLinesStrategy(NormalStrategy(confirm))
    if kind is StrategyKind.JSON:
        return JsonStrategy(indent=indent)
    if kind is StrategyKind.JSON_TEMPLATE:
        return JsonTemplateStrategy(answers, indent=indent)
    raise ValueError(f"Unknown write strategy: {kind!r}")
