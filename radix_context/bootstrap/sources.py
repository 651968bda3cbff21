"""
업스트림 소스 저장소 동기화
- 문서(context/)가 참조하는 저장소들을 .repos/<name> 에 shallow clone.
- 이미 존재하는 디렉토리는 건드리지 않고 skip (멱등).
- clone 실패 시 그 자리에서 FetchError (이후 저장소는 진행하지 않음).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .. import console
from ..types import SourceRepo
from .fetch import clone_repository

UPSTREAM_SOURCES: List[SourceRepo] = [
    SourceRepo("consultation_v2", "git@github.com:radixdlt/consultation_v2.git", "main"),
    SourceRepo("radix-dapp-toolkit", "https://github.com/radixdlt/radix-dapp-toolkit", "main"),
    SourceRepo("radix-docs", "git@github.com:gguuttss/radix-docs.git", "master"),
    SourceRepo("radix-gateway-api-rust", "git@github.com:ociswap/radix-client.git", "main"),
    SourceRepo("radixdlt-scrypto", "git@github.com:radixdlt/radixdlt-scrypto.git", "develop"),
    SourceRepo("rola", "git@github.com:radixdlt/rola.git", "main"),
    SourceRepo("tanstack-router", "git@github.com:TanStack/router.git", "main"),
    SourceRepo("effect", "git@github.com:Effect-TS/effect.git", "main"),
    SourceRepo("radix-web3.js", "git@github.com:xstelea/radix-web3.js.git", "main"),
    SourceRepo("radix-engine-toolkit", "git@github.com:radixdlt/radix-engine-toolkit.git", "main"),
    SourceRepo(
        "typescript-radix-engine-toolkit",
        "git@github.com:radixdlt/typescript-radix-engine-toolkit.git",
        "main",
    ),
]


def source_names() -> List[str]:
    return [repo.name for repo in UPSTREAM_SOURCES]


def select_sources(names: Optional[Iterable[str]] = None) -> List[SourceRepo]:
    """names가 주어지면 해당 저장소만 (원래 순서 유지), 없으면 전체."""
    if not names:
        return list(UPSTREAM_SOURCES)
    wanted = set(names)
    unknown = wanted - set(source_names())
    if unknown:
        raise ValueError(f"unknown source(s): {', '.join(sorted(unknown))}")
    return [repo for repo in UPSTREAM_SOURCES if repo.name in wanted]


def sync_sources(
    dest: Path,
    repos: Optional[Iterable[SourceRepo]] = None,
    *,
    git: str = "git",
    depth: int = 1,
) -> Dict[str, str]:
    """
    repos 각각을 dest/<name> 에 clone.
    반환: {name: "skip" | "clone"}
    """
    repos = list(UPSTREAM_SOURCES if repos is None else repos)
    dest.mkdir(parents=True, exist_ok=True)

    actions: Dict[str, str] = {}
    for repo in repos:
        checkout = dest / repo.name
        if checkout.exists():
            console.say("skip", f"{checkout} already exists")
            actions[repo.name] = "skip"
            continue
        console.say("clone", f"{repo.remote} -> {checkout} (branch: {repo.branch})")
        # git 진행 상황은 그대로 터미널에 출력
        clone_repository(repo.remote, checkout, branch=repo.branch, depth=depth, git=git, quiet=False)
        actions[repo.name] = "clone"
    return actions
