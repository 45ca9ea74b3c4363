"""Dependency installation through an external package manager."""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from ..core.errors import InstallError
from ..settings import get_settings

logger = logging.getLogger(__name__)

_NAME_SEPARATORS = re.compile(r"[_. ]")


def npm_name(path: str | Path) -> str:
    """Derive a package name from a directory path.

    >>> npm_name("/work/My_Cool.App")
    'my-cool-app'
    """
    return _NAME_SEPARATORS.sub("-", Path(path).name.lower())


def _install_group(executable: str, args: Sequence[str], output: Path) -> None:
    cmd = [executable, "install", *args]
    logger.info(f"Running {' '.join(cmd)} in {output}")
    try:
        subprocess.run(cmd, cwd=str(output), check=True)
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"{' '.join(cmd)} exited with status {e.returncode}"
        ) from e


def npm_install(
    output: Path,
    *,
    dependencies: Sequence[str] = (),
    dev_dependencies: Sequence[str] = (),
    executable: str | None = None,
) -> None:
    """Install dev dependencies, then regular dependencies, into ``output``.

    Each group runs as its own child process with inherited stdio and only
    when it is non-empty. A non-zero exit aborts with InstallError.

    Args:
        output: Project directory used as the working directory
        dependencies: Packages for ``install``
        dev_dependencies: Packages for ``install -D``
        executable: Package manager binary (defaults to settings)
    """
    executable = executable or get_settings().package_manager
    if not dependencies and not dev_dependencies:
        logger.debug("No dependencies to install")
        return

    if shutil.which(executable) is None:
        raise InstallError(f"missing dependency: {executable}")

    if dev_dependencies:
        _install_group(executable, ["-D", *dev_dependencies], output)
    if dependencies:
        _install_group(executable, list(dependencies), output)
