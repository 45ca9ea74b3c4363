"""Apply a manifest of write strategies, one entry at a time."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ..core.models import (
    Manifest,
    ManifestEntry,
    ManifestResult,
    ResolvedPaths,
    WriteOutcome,
)
from .prompt import Prompter
from .strategies import build_strategy, default_prompter

logger = logging.getLogger(__name__)


def resolve_paths(input_root: Path, output_root: Path, entry: ManifestEntry) -> ResolvedPaths:
    """Resolve an entry's relative paths against the manifest roots."""
    return ResolvedPaths(
        input_file=(input_root / entry.input).resolve(),
        output_file=(output_root / entry.output).resolve(),
    )


def write_manifest(
    manifest: Manifest | Mapping[str, Any],
    *,
    answers: Mapping[str, Any] | None = None,
    prompter: Prompter | None = None,
) -> list[ManifestResult]:
    """Write every manifest entry in order.

    Entries run strictly one after another: later entries may rely on files
    written by earlier ones, and overwrite prompts appear in manifest order.
    The first unexpected error stops the pass; files already written stay.

    Args:
        manifest: Manifest model or a mapping validated into one
        answers: Answers context for template strategies
        prompter: Prompt used for overwrite confirmations

    Returns:
        One result per written entry
    """
    if not isinstance(manifest, Manifest):
        manifest = Manifest.model_validate(manifest)

    entries = manifest.entries()
    skipped = len(manifest.files) - len(entries)
    logger.info(f"Writing {len(entries)} file(s) into {manifest.output}")
    if skipped:
        logger.debug(f"Skipped {skipped} empty manifest entries")

    prompter = prompter or default_prompter()
    results: list[ManifestResult] = []
    for entry in entries:
        paths = resolve_paths(manifest.input, manifest.output, entry)
        strategy = build_strategy(entry.strategy, answers=answers, prompter=prompter)
        logger.debug(
            f"{entry.strategy.value}: {paths.input_file} -> {paths.output_file}"
        )
        outcome = strategy.write(paths.input_file, paths.output_file)
        results.append(ManifestResult(entry=entry, paths=paths, outcome=outcome))

    declined = sum(1 for r in results if r.outcome is WriteOutcome.DECLINED)
    logger.info(
        f"Wrote {len(results) - declined} file(s), kept {declined} existing file(s)"
    )
    return results
