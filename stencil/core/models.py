"""Domain models for scaffold manifests and write results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class StrategyKind(str, Enum):
    """Conflict policy applied when materializing a single file."""

    NORMAL = "normal"
    TEMPLATE = "template"
    CONFIRM = "confirm"
    UNIQUE_LINES = "unique_lines"
    JSON = "json"
    JSON_TEMPLATE = "json_template"


class WriteOutcome(str, Enum):
    """What a strategy did to its destination."""

    WRITTEN = "written"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"
    DECLINED = "declined"


class ManifestEntry(BaseModel):
    """A single source to destination mapping."""

    model_config = ConfigDict(frozen=True)

    input: Path = Field(..., description="Source path relative to the input root")
    output: Path = Field(..., description="Destination path relative to the output root")
    strategy: StrategyKind = Field(
        default=StrategyKind.NORMAL,
        validation_alias=AliasChoices("strategy", "write"),
        description="Write strategy (defaults to copy-if-absent)",
    )

    @field_validator("strategy", mode="before")
    @classmethod
    def _default_strategy(cls, value: Any) -> Any:
        return value or StrategyKind.NORMAL


class Manifest(BaseModel):
    """Input and output roots plus the ordered list of files to write."""

    input: Path = Field(..., description="Template root directory")
    output: Path = Field(..., description="Destination root directory")
    files: list[ManifestEntry | None] = Field(
        default_factory=list, description="Entries; falsy entries are skipped"
    )

    @field_validator("files", mode="before")
    @classmethod
    def _drop_falsy(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [item or None for item in value]
        return value

    def entries(self) -> list[ManifestEntry]:
        """Return the entries that will actually be written."""
        return [entry for entry in self.files if entry is not None]


@dataclass(frozen=True)
class ResolvedPaths:
    input_file: Path
    output_file: Path


@dataclass(frozen=True)
class ManifestResult:
    entry: ManifestEntry
    paths: ResolvedPaths
    outcome: WriteOutcome


class Question(BaseModel):
    """A question asked before writing, answered into the answers context."""

    name: str = Field(..., min_length=1, description="Answer key")
    type: Literal["text", "confirm"] = Field(default="text")
    message: str = Field(default="", description="Prompt shown to the user")
    default: Any = Field(default=None, description="Value used when left blank")

    def prompt_message(self) -> str:
        return self.message or self.name
