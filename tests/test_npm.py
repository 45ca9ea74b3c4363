from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from stencil.core.errors import InstallError
from stencil.install import npm


class FakeRun:
    def __init__(self, *returncodes: int) -> None:
        self.returncodes = list(returncodes)
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        code = self.returncodes.pop(0) if self.returncodes else 0
        if kwargs.get("check") and code != 0:
            raise subprocess.CalledProcessError(code, cmd)
        return subprocess.CompletedProcess(cmd, code)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    runner = FakeRun()
    monkeypatch.setattr(npm.subprocess, "run", runner)
    monkeypatch.setattr(npm.shutil, "which", lambda name: f"/usr/bin/{name}")
    return runner


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/work/My_Cool.App", "my-cool-app"),
        ("a b_c.d e", "a-b-c-d-e"),
        (Path("/srv/plain"), "plain"),
    ],
)
def test_npm_name(path, expected) -> None:
    assert npm.npm_name(path) == expected


def test_installs_dev_dependencies_first(tmp_path: Path, fake_run: FakeRun) -> None:
    npm.npm_install(
        tmp_path, dependencies=["react"], dev_dependencies=["jest", "eslint"]
    )

    assert [cmd for cmd, _ in fake_run.calls] == [
        ["npm", "install", "-D", "jest", "eslint"],
        ["npm", "install", "react"],
    ]
    assert all(kwargs["cwd"] == str(tmp_path) for _, kwargs in fake_run.calls)
    assert all(kwargs["check"] is True for _, kwargs in fake_run.calls)
    assert all("stdout" not in kwargs for _, kwargs in fake_run.calls)


def test_skips_empty_groups(tmp_path: Path, fake_run: FakeRun) -> None:
    npm.npm_install(tmp_path, dependencies=["react"])
    npm.npm_install(tmp_path)

    assert [cmd for cmd, _ in fake_run.calls] == [["npm", "install", "react"]]


def test_uses_configured_package_manager(
    tmp_path: Path, fake_run: FakeRun, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("STENCIL_PACKAGE_MANAGER", "pnpm")

    npm.npm_install(tmp_path, dev_dependencies=["vitest"])

    assert fake_run.calls[0][0] == ["pnpm", "install", "-D", "vitest"]


def test_non_zero_exit_aborts(tmp_path: Path, fake_run: FakeRun) -> None:
    fake_run.returncodes = [1]

    with pytest.raises(InstallError, match="status 1"):
        npm.npm_install(tmp_path, dependencies=["react"], dev_dependencies=["jest"])

    assert len(fake_run.calls) == 1


def test_missing_executable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(npm.shutil, "which", lambda name: None)

    with pytest.raises(InstallError, match="missing dependency: yarn"):
        npm.npm_install(tmp_path, dependencies=["react"], executable="yarn")
