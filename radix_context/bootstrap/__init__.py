"""
번들 준비(부트스트랩) 전용 모듈.
- 로컬 번들을 찾거나, 없으면 원격 저장소를 임시 디렉토리에 clone.
- 업스트림 소스 저장소(.repos/) 동기화.
"""

from . import probe, fetch, resolve, manager, sources

__all__ = ["probe", "fetch", "resolve", "manager", "sources"]
