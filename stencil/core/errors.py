"""Exceptions raised by the scaffolding core."""

from __future__ import annotations


class StencilError(Exception):
    """Base class for scaffolding failures."""


class TemplateRenderError(StencilError):
    """Raised when a template cannot be compiled or rendered."""


class MalformedJsonError(StencilError, ValueError):
    """Raised when a JSON source or destination cannot be merged."""


class ScaffoldCancelled(StencilError):
    """Raised when the user cancels an interactive prompt."""


class InstallError(StencilError):
    """Raised when dependency installation fails."""
