"""
git 실행 환경 감지 유틸
- git 실행 파일 경로 확인 (clone 전에 호출).
"""
import shutil
from typing import Optional

from ..errors import GitNotFoundError


def git_path(git: str = "git") -> Optional[str]:
    """PATH에서 git 실행 파일 위치를 반환 (없으면 None)"""
    return shutil.which(git)


def require_git(git: str = "git", remote: str = "") -> str:
    """git 실행 파일 경로를 반환. 없으면 GitNotFoundError."""
    path = git_path(git)
    if path is None:
        raise GitNotFoundError(git, remote)
    return path
