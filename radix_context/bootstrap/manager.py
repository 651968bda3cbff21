"""
번들 준비 관리자

동작 개요:
1) 로컬 번들이 있으면 그대로 사용:   resolve.find_local_bundle()
2) 없으면:
   - 임시 디렉토리 생성 (프로세스 단위)
   - 원격 저장소 shallow clone:      fetch.clone_repository()
   - 번들 검증:                       resolve.bundle_at()
3) with 블록 종료 시 임시 디렉토리 삭제 (정상 종료/예외/Ctrl-C 모두)

주의:
- 원격 번들의 경로는 with 블록 안에서만 유효하다.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .. import console
from ..config import Settings, settings as default_settings
from ..types import Bundle
from .fetch import clone_repository
from .resolve import bundle_at, find_local_bundle

TMP_PREFIX = "radix-context-"


@contextmanager
def ensure_bundle(settings: Optional[Settings] = None) -> Iterator[Bundle]:
    """로컬 번들 또는 임시 clone 번들을 yield 한다."""
    settings = settings or default_settings

    # 0) 로컬 번들 존재하면 즉시 사용
    local = find_local_bundle(settings)
    if local is not None:
        yield local
        return

    # 1) 원격 모드: 임시 디렉토리에 clone (git 출력은 숨김)
    with tempfile.TemporaryDirectory(prefix=TMP_PREFIX) as tmp:
        console.notice("Cloning radix-context...")
        root = clone_repository(
            settings.REPO_URL,
            Path(tmp) / "repo",
            branch=settings.REPO_BRANCH,
            depth=settings.CLONE_DEPTH,
            git=settings.GIT_EXECUTABLE,
            quiet=True,
        )
        yield bundle_at(root, settings, remote=True)


# 선택: CLI로 단독 실행 테스트 지원
if __name__ == "__main__":
    with ensure_bundle() as bundle:
        mode = "remote" if bundle.remote else "local"
        print(f"[bootstrap] {mode} bundle: {bundle.root}")
        for entry in sorted(bundle.context_dir.iterdir()):
            print(f"  {entry.name}")
