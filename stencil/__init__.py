"""Stencil - Project scaffolding with conflict-aware file writers.

Copies and renders template files into a destination directory, merging
with or confirming over files that already exist.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import (
    InstallError,
    MalformedJsonError,
    ScaffoldCancelled,
    StencilError,
    TemplateRenderError,
)
from .core.models import Manifest, ManifestEntry, StrategyKind, WriteOutcome
from .writing.manifest import write_manifest

# Re-export main CLI entry point
from .cli import main

__all__ = [
    "InstallError",
    "MalformedJsonError",
    "Manifest",
    "ManifestEntry",
    "ScaffoldCancelled",
    "StencilError",
    "StrategyKind",
    "TemplateRenderError",
    "WriteOutcome",
    "main",
    "write_manifest",
]
