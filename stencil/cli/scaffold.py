"""Scaffold definitions loaded from a template directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Union

from pydantic import AliasChoices, BaseModel, Field

from ..core.models import Manifest, ManifestEntry, Question, StrategyKind
from ..rendering.engine import render_template
from ..writing.prompt import Prompter

logger = logging.getLogger(__name__)

QuestionSource = Union[Iterable[Question], Callable[[Mapping[str, Any]], Iterable[Question]]]


class FileSpec(BaseModel):
    """A manifest entry as written in ``stencil.yaml``."""

    input: Path = Field(..., description="Source path relative to the template directory")
    output: str | None = Field(
        default=None, description="Destination path template (defaults to input)"
    )
    strategy: StrategyKind = Field(
        default=StrategyKind.NORMAL, validation_alias=AliasChoices("strategy", "write")
    )
    when: str | None = Field(
        default=None, description="Answer name that must be truthy to write this file"
    )


class ScaffoldFile(BaseModel):
    """Files, questions and dependencies of one template."""

    files: list[FileSpec] = Field(default_factory=list)
    questions: list[Question] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dev_dependencies", "devDependencies"),
    )

    def to_manifest(
        self, template_dir: Path, output: Path, answers: Mapping[str, Any]
    ) -> Manifest:
        """Build the manifest for these answers.

        Files whose ``when`` answer is falsy become empty entries, and output
        paths are rendered with the answers.
        """
        files: list[ManifestEntry | None] = []
        for spec in self.files:
            if spec.when is not None and not answers.get(spec.when):
                logger.debug(f"Skipping {spec.input}: {spec.when!r} is not set")
                files.append(None)
                continue
            output_path = render_template(spec.output or str(spec.input), answers)
            files.append(
                ManifestEntry(
                    input=spec.input, output=Path(output_path), strategy=spec.strategy
                )
            )
        return Manifest(input=template_dir, output=output, files=files)


def collect_answers(
    questions: QuestionSource,
    flags: Mapping[str, Any],
    prompter: Prompter,
) -> dict[str, Any]:
    """Ask every question not already answered by a flag.

    Args:
        questions: Questions, or a callable building them from the flags
        flags: Values given on the command line
        prompter: Prompt used to ask

    Returns:
        Flags merged with the collected answers
    """
    if callable(questions):
        questions = questions(flags)

    answers: dict[str, Any] = {}
    for question in questions:
        if flags.get(question.name) is not None:
            logger.debug(f"Answer for {question.name!r} given as a flag")
            continue
        if question.type == "confirm":
            answers[question.name] = prompter.confirm(
                question.prompt_message(), default=bool(question.default)
            )
        else:
            answers[question.name] = prompter.text(
                question.prompt_message(), default=question.default
            )

    return {**flags, **answers}
