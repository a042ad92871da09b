import subprocess
from pathlib import Path

import pytest

from releaser import executor
from releaser.config import ReleaseConfig
from releaser.logger import Logger


MANIFEST = """\
[package]
name = "app"
version = "0.1.0"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
"""


class FakeCargo:
    """Stands in for ``subprocess.run`` and writes the binaries cargo would."""

    def __init__(self, binary_name="app", fail_on=None, write_binaries=True):
        self.binary_name = binary_name
        self.fail_on = fail_on
        self.write_binaries = write_binaries
        self.calls = []

    def __call__(self, cmd, cwd=None, env=None, **kwargs):
        self.calls.append({"cmd": list(cmd), "cwd": Path(cwd), "env": dict(env)})

        triple = cmd[cmd.index("--target") + 1] if "--target" in cmd else None
        if self.fail_on is not None and triple == self.fail_on:
            return subprocess.CompletedProcess(cmd, 101)

        if self.write_binaries:
            out_dir = Path(cwd) / "target"
            if triple:
                out_dir = out_dir / triple
            out_dir = out_dir / "release"
            out_dir.mkdir(parents=True, exist_ok=True)
            (out_dir / self.binary_name).write_bytes(f"binary for {triple or 'host'}".encode())
        return subprocess.CompletedProcess(cmd, 0)


@pytest.fixture
def project(tmp_path):
    (tmp_path / "Cargo.toml").write_text(MANIFEST, encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_cargo(monkeypatch):
    fake = FakeCargo()
    monkeypatch.setattr(executor.subprocess, "run", fake)
    return fake


@pytest.fixture
def logger():
    return Logger(use_color=False)


@pytest.fixture
def config(project):
    return ReleaseConfig(project_root=project)
