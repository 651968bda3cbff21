"""
원격 저장소 clone 유틸
- 항상 shallow(--depth) + single-branch clone.
- 실패 시 재시도 없이 FetchError로 git 오류를 그대로 전달.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import FetchError
from .probe import require_git


def build_clone_cmd(
    git: str,
    remote: str,
    dest: Path,
    *,
    branch: Optional[str] = None,
    depth: int = 1,
) -> List[str]:
    cmd = [git, "clone", "--depth", str(depth), "--single-branch"]
    if branch:
        cmd += ["--branch", branch]
    cmd += [remote, str(dest)]
    return cmd


def clone_repository(
    remote: str,
    dest: Path,
    *,
    branch: Optional[str] = None,
    depth: int = 1,
    git: str = "git",
    quiet: bool = True,
) -> Path:
    """
    remote를 dest로 clone하고 dest를 반환.
    - quiet=True 이면 git 출력(stdout/stderr)을 캡처해 화면에 보이지 않음.
      실패 시 캡처한 stderr를 FetchError에 담는다.
    - quiet=False 이면 git 출력을 그대로 터미널에 보여준다.
    """
    git_exe = require_git(git, remote)
    cmd = build_clone_cmd(git_exe, remote, dest, branch=branch, depth=depth)

    try:
        cp = subprocess.run(
            cmd,
            text=True,
            stdout=subprocess.PIPE if quiet else None,
            stderr=subprocess.PIPE if quiet else None,
        )
    except OSError as e:
        raise FetchError(remote, stderr=str(e)) from e

    if cp.returncode != 0:
        raise FetchError(remote, returncode=cp.returncode, stderr=cp.stderr if quiet else None)
    return dest
