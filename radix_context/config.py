# config.py
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트(.env)는 이 패키지의 부모 폴더.
# 환경 변수(RADIX_CONTEXT_*)가 .env 파일보다 우선 적용됩니다.
env_file_path = Path(__file__).resolve().parent.parent / ".env"

DEFAULT_REPO_URL = "https://github.com/xstelea/radix-context.git"


class Settings(BaseSettings):
    # 원격 번들 저장소 (로컬 번들이 없을 때만 clone)
    REPO_URL: str = DEFAULT_REPO_URL
    REPO_BRANCH: Optional[str] = None
    CLONE_DEPTH: int = 1
    GIT_EXECUTABLE: str = "git"

    # 번들 위치/레이아웃
    BUNDLE_DIR: Optional[Path] = None
    CONTEXT_DIR_NAME: str = "context"
    INDEX_FILE_NAME: str = "AGENTS.md"

    # setup: 업스트림 저장소 체크아웃 위치
    SOURCES_DIR: Path = Path(".repos")

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_prefix="RADIX_CONTEXT_",
        extra="ignore",
    )


# 설정 객체 생성
settings = Settings()
