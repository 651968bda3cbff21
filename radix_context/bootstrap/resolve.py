"""
번들 위치 결정 규칙.
- 로컬 모드: BUNDLE_DIR(설정) 또는 패키지 상위 폴더에 context/ 디렉토리가 있으면 그대로 사용.
- 그 외에는 원격 모드 (manager.ensure_bundle 에서 clone).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import Settings
from ..errors import BundleError
from ..types import Bundle


def default_bundle_root() -> Path:
    """체크아웃 루트: radix_context 패키지의 부모 폴더"""
    return Path(__file__).resolve().parents[2]


def bundle_at(root: Path, settings: Settings, *, remote: bool = False) -> Bundle:
    """
    root 아래의 context/ 와 AGENTS.md 를 확인하고 Bundle 반환.
    둘 중 하나라도 없으면 BundleError (대상 디렉토리에 쓰기 전에 실패).
    """
    context_dir = root / settings.CONTEXT_DIR_NAME
    index_file = root / settings.INDEX_FILE_NAME
    if not context_dir.is_dir():
        raise BundleError(f"bundle at '{root}' has no {settings.CONTEXT_DIR_NAME}/ directory")
    if not index_file.is_file():
        raise BundleError(f"bundle at '{root}' has no {settings.INDEX_FILE_NAME}")
    return Bundle(root=root, context_dir=context_dir, index_file=index_file, remote=remote)


def find_local_bundle(settings: Settings) -> Optional[Bundle]:
    """
    로컬 번들이 있으면 Bundle, 없으면 None.
    - BUNDLE_DIR가 명시된 경우: 반드시 로컬 모드 (검증 실패 시 BundleError).
    - 기본 위치: context/ 디렉토리 존재 여부로만 판정 (AGENTS.md 누락은 BundleError).
    """
    if settings.BUNDLE_DIR:
        return bundle_at(Path(settings.BUNDLE_DIR), settings, remote=False)

    root = default_bundle_root()
    if not (root / settings.CONTEXT_DIR_NAME).is_dir():
        return None
    return bundle_at(root, settings, remote=False)
