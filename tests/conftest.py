"""
Pytest configuration and fixtures
"""
import os
from pathlib import Path

import pytest

from radix_context.bootstrap import manager, resolve
from radix_context.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RADIX_CONTEXT_* variables of the developer's shell out of the tests"""
    for key in list(os.environ):
        if key.startswith("RADIX_CONTEXT_"):
            monkeypatch.delenv(key, raising=False)


def write_bundle(root: Path, files=None, index: bytes = b"INDEX") -> Path:
    """Materialise a bundle (context/ + AGENTS.md) under root"""
    files = {"a.md": b"A"} if files is None else files
    context_dir = root / "context"
    context_dir.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        path = context_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    (root / "AGENTS.md").write_bytes(index)
    return root


@pytest.fixture
def bundle_dir(tmp_path):
    """A local bundle with context/a.md == "A" and AGENTS.md == "INDEX"."""
    return write_bundle(tmp_path / "bundle")


@pytest.fixture
def local_settings(bundle_dir):
    return Settings(BUNDLE_DIR=bundle_dir)


@pytest.fixture
def target(tmp_path):
    path = tmp_path / "proj"
    path.mkdir()
    return path


class FakeClone:
    """Stands in for fetch.clone_repository; writes a bundle instead of running git."""

    def __init__(self, files=None, index: bytes = b"INDEX", error: Exception = None):
        self.files = files
        self.index = index
        self.error = error
        self.calls = []

    def __call__(self, remote, dest, *, branch=None, depth=1, git="git", quiet=True):
        self.calls.append({
            "remote": remote,
            "dest": Path(dest),
            "branch": branch,
            "depth": depth,
            "git": git,
            "quiet": quiet,
        })
        if self.error is not None:
            raise self.error
        return write_bundle(Path(dest), self.files, self.index)


@pytest.fixture
def fake_clone(monkeypatch, tmp_path):
    """Force remote mode: no local bundle next to the package, clone patched."""
    empty_root = tmp_path / "no-bundle"
    empty_root.mkdir()
    monkeypatch.setattr(resolve, "default_bundle_root", lambda: empty_root)

    clone = FakeClone()
    monkeypatch.setattr(manager, "clone_repository", clone)
    return clone
