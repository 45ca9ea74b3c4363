from .manifest import resolve_paths, write_manifest
from .strategies import build_strategy

__all__ = ["build_strategy", "resolve_paths", "write_manifest"]
